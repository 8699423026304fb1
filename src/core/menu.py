"""
Menú lateral deslizante.

Este módulo contiene la clase SlideMenu con el estado del menú de navegación:
visible/oculto, progreso de la animación de deslizamiento y las pantallas
disponibles.
"""


DEFAULT_ITEMS = [
    ("calculadora", "Calculadora"),
    ("reloj", "Reloj"),
]


# ============================================================================
# CLASE: SlideMenu
# Propósito: Estado del menú de navegación
# Responsabilidades:
#   - Abrir/cerrar el menú (toggle)
#   - Animar el deslizamiento (progress 0.0 = oculto, 1.0 = abierto)
#   - Detectar qué opción hay bajo el ratón
# ============================================================================
class SlideMenu:
    """
    Menú lateral que entra desde la izquierda.

    is_open es el estado destino; progress es la posición real del panel,
    que se acerca al destino en cada llamada a update().
    """

    def __init__(self, items=None, speed=4.0):
        """
        Args:
            items (list): Lista de (id_pantalla, etiqueta)
            speed (float): Velocidad de la animación en unidades de progress por segundo
                (4.0 = abre en 0.25s)
        """
        self.items = list(items) if items else list(DEFAULT_ITEMS)
        self.speed = speed
        self.is_open = False
        self.progress = 0.0

    def toggle(self):
        self.is_open = not self.is_open

    def open(self):
        self.is_open = True

    def close(self):
        self.is_open = False

    @property
    def is_visible(self):
        return self.progress > 0.0

    def update(self, dt):
        """
        Avanza la animación.

        Args:
            dt (float): Segundos transcurridos desde el último frame

        Returns:
            float: Progreso actual en [0, 1]
        """
        step = self.speed * max(dt, 0.0)
        if self.is_open:
            self.progress = min(1.0, self.progress + step)
        else:
            self.progress = max(0.0, self.progress - step)
        return self.progress

    def item_at(self, x, y, panel_width, item_height, top):
        """
        Hit test de una opción del menú.

        Args:
            x, y (int): Posición del ratón
            panel_width (int): Ancho del panel totalmente abierto
            item_height (int): Alto de cada opción
            top (int): Coordenada y de la primera opción

        Returns:
            int: Índice de la opción, o None si no hay ninguna bajo (x, y)
        """
        if not self.is_visible:
            return None
        # El panel está desplazado hacia la izquierda mientras se anima
        visible_right = int(panel_width * self.progress)
        if x < 0 or x >= visible_right or y < top:
            return None
        index = (y - top) // item_height
        if index >= len(self.items):
            return None
        return index

    def select(self, index):
        """
        Selecciona una opción y cierra el menú.

        Returns:
            str: id de la pantalla seleccionada

        Raises:
            IndexError: Si el índice no existe
        """
        if index < 0 or index >= len(self.items):
            raise IndexError(f"Opción de menú inexistente: {index}")
        screen_id = self.items[index][0]
        self.close()
        return screen_id

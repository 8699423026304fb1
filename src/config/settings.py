"""
Configuración de la aplicación.

Este módulo contiene la configuración centralizada: ventana, voz, límite de
dígitos del display y animación del menú.
"""

# ============================================================================
# CLASE: AppConfig
# Propósito: Preferencias de la aplicación
# Responsabilidades:
#   - Almacenar preferencias de voz (activada, volumen, velocidad, idioma)
#   - Tamaño de la ventana y tasa de refresco
#   - Límites de entrada de la calculadora
#   - Opciones del reloj y del menú
# ============================================================================
class AppConfig:
    """
    Configuración de la calculadora con reloj y menú.

    Se pasa por constructor a cada componente. Algunas opciones se cambian en
    tiempo de ejecución (ej: la voz con la tecla 'v').
    """

    def __init__(self, **overrides):
        """
        Inicializa configuración con valores por defecto.

        Args:
            **overrides: Cualquier atributo a sobrescribir (ej: voice_enabled=False)

        Raises:
            AttributeError: Si se pasa una opción que no existe
        """
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = 'Calculadora'
        self.width = 480
        self.height = 760
        self.fps = 30                       # Frames por segundo del bucle principal

        # ====================================================================
        # CALCULADORA
        # ====================================================================
        self.max_digits = 12                # Máximo de dígitos al escribir (None = sin límite)
        self.feedback_frames = 40           # Duración del mensaje de feedback (~1.3s @ 30fps)

        # ====================================================================
        # RELOJ Y MENÚ
        # ====================================================================
        self.show_seconds = True            # HH:MM:SS o HH:MM con ":" parpadeante
        self.menu_speed = 4.0               # Progreso de animación por segundo (0.25s)
        self.start_screen = 'calculadora'   # Pantalla inicial

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Opción de configuración desconocida: {name}")
            setattr(self, name, value)

    def get_frame_delay(self):
        """Retorna la espera de cv2.waitKey en milisegundos según fps."""
        return max(1, int(1000 / self.fps))

"""
Reloj digital.

Este módulo contiene la clase DigitalClock que decide cuándo refrescar la
pantalla del reloj (una vez por segundo) y genera los textos de hora y fecha.
"""

from datetime import datetime


DIAS = ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"]
MESES = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]


# ============================================================================
# CLASE: DigitalClock
# Propósito: Tick de un segundo y formateo de hora/fecha
# ============================================================================
class DigitalClock:
    """
    Reloj digital de 24 horas.

    El bucle principal llama a tick() en cada frame (~30 veces por segundo);
    tick() solo devuelve True cuando cambia el segundo, que es cuando hay
    que redibujar la hora.
    """

    def __init__(self, show_seconds=True, now_fn=datetime.now):
        """
        Args:
            show_seconds (bool): Mostrar HH:MM:SS (True) o HH:MM (False)
            now_fn (callable): Fuente de la hora actual (inyectable para tests)
        """
        self.show_seconds = show_seconds
        self.now_fn = now_fn
        self.current = None           # Último instante aceptado (truncado al segundo)
        self.colon_visible = True     # Parpadeo de ":" cuando no hay segundos

    def tick(self, now=None):
        """
        Avanza el reloj.

        Args:
            now (datetime): Instante actual (None = usar now_fn)

        Returns:
            bool: True si cambió el segundo desde el último tick aceptado
        """
        if now is None:
            now = self.now_fn()
        now = now.replace(microsecond=0)

        if self.current is not None and now == self.current:
            return False

        if self.current is not None:
            self.colon_visible = not self.colon_visible
        self.current = now
        return True

    @property
    def time_text(self):
        if self.current is None:
            self.tick()
        if self.show_seconds:
            return self.current.strftime("%H:%M:%S")
        sep = ":" if self.colon_visible else " "
        return f"{self.current:%H}{sep}{self.current:%M}"

    @property
    def date_text(self):
        """Fecha larga en español, ej: "sábado, 18 de octubre de 2026"."""
        if self.current is None:
            self.tick()
        d = self.current
        return f"{DIAS[d.weekday()]}, {d.day} de {MESES[d.month - 1]} de {d.year}"

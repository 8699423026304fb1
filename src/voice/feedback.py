"""
Sistema de feedback por voz usando pyttsx3.

Este módulo lee en voz alta los dígitos, operaciones y resultados de la
calculadora. La síntesis se ejecuta en un hilo aparte para no bloquear el
bucle de la ventana.
"""

import threading
import pyttsx3
from collections import deque

from core.calculator import Operator


NUMEROS = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
}

OPERACIONES = {
    Operator.ADD: "más",
    Operator.SUBTRACT: "menos",
    Operator.MULTIPLY: "por",
    Operator.DIVIDE: "entre",
}


def result_to_speech(text):
    """
    Convierte el texto del display en una frase pronunciable.

    Ejemplos:
        "-3"    → "menos 3"
        "0.25"  → "0 coma 25"
        "1e-05" → "1 por diez a la menos 05"
    """
    spoken = text
    if "e" in spoken:
        mantissa, exponent = spoken.split("e", 1)
        spoken = f"{mantissa} por diez a la {exponent.lstrip('+')}"
    spoken = spoken.replace(".", " coma ")
    spoken = spoken.replace("-", "menos ")
    return " ".join(spoken.split())


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en español
#   - Ejecutar en hilo separado para no bloquear la ventana
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    El motor se inicializa la primera vez que la voz está activada, de modo
    que con voice_enabled=False no se toca pyttsx3.
    """

    def __init__(self, config):
        """
        Args:
            config (AppConfig): Configuración de la aplicación
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self._lock = threading.Lock()
        self._thread = None                   # Hilo que vacía la cola

        if self.config.voice_enabled:
            self._init_engine()

    def _init_engine(self):
        """Inicializa pyttsx3. Si falla, desactiva la voz en la configuración."""
        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """
        Configura volumen, velocidad y busca una voz del idioma configurado.
        Si no hay ninguna, se queda la voz predeterminada del sistema.
        """
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        lang = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices'):
            languages = [str(l).lower() for l in (getattr(voice, 'languages', None) or [])]
            voice_id = voice.id.lower()
            if any(lang in l for l in languages) or f"{lang}-" in voice_id or f"/{lang}" in voice_id:
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voz seleccionada: {voice.name}")
                return

        print(f"⚠ No se encontró voz para '{self.config.voice_language}'. Usando voz predeterminada.")

    def set_enabled(self, enabled):
        """Activa/desactiva la voz, inicializando el motor si hace falta."""
        self.config.voice_enabled = enabled
        if enabled and self.engine is None:
            self._init_engine()

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar

        Si la cola está llena se descarta el mensaje más antiguo.
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        self._thread = threading.Thread(target=self._process_queue, daemon=True)
        self._thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_digit(self, digit):
        self.speak(NUMEROS.get(str(digit), str(digit)))

    def speak_operator(self, op):
        """
        Args:
            op (Operator): Operación seleccionada
        """
        self.speak(OPERACIONES.get(op, op.value))

    def speak_result(self, text):
        """
        Args:
            text (str): Display tras pulsar = (ej: "0.25")
        """
        self.speak(f"igual a {result_to_speech(text)}")

    def shutdown(self, timeout=1.0):
        """
        Detiene la síntesis en curso, vacía la cola y espera al hilo.

        Args:
            timeout (float): Segundos máximos de espera al hilo de voz
        """
        with self._lock:
            self.message_queue.clear()
        if self.engine:
            try:
                self.engine.stop()
            except Exception as e:
                print(f"⚠ Error al detener la voz: {e}")

        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
            if thread.is_alive():
                print("⚠ El hilo de voz no terminó a tiempo")
        self._thread = None

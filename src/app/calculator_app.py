"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2
import time
from core.calculator import Accumulator, Operator
from core.clock import DigitalClock
from core.menu import SlideMenu
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback
from config.settings import AppConfig


# Mensaje de feedback y color BGR de cada operación
OPERATOR_FEEDBACK = {
    Operator.ADD: ("+ SUMA", (0, 255, 0)),
    Operator.SUBTRACT: ("- RESTA", (255, 150, 0)),
    Operator.MULTIPLY: ("x MULTIPLICAR", (255, 100, 255)),
    Operator.DIVIDE: ("/ DIVIDIR", (150, 100, 255)),
}

# Solo dígitos ASCII: str.isdigit() también acepta "²", "³" y "¹"
DIGITS = "0123456789"

KEY_ESC = 27
KEYS_ENTER = (10, 13)
KEYS_BACKSPACE = (8, 127)


# ============================================================================
class CalculatorApp:
    """
    Aplicación de calculadora con reloj y menú lateral.

    Arquitectura:
        - Accumulator: Lógica aritmética y estado
        - DigitalClock: Tick de un segundo de la pantalla de reloj
        - SlideMenu: Navegación entre pantallas
        - UIRenderer: Renderizado con OpenCV
        - VoiceFeedback: Lectura en voz alta
        - CalculatorApp: Coordinador y bucle principal

    Toda la entrada (ratón y teclado) se procesa en el hilo del bucle,
    un evento cada vez.
    """

    def __init__(self, config=None):
        """
        Inicializa los componentes. La ventana no se abre hasta run().

        Args:
            config (AppConfig): Configuración de la aplicación (opcional)
        """
        self.config = config if config else AppConfig()

        self.acc = Accumulator(max_digits=self.config.max_digits)
        self.clock = DigitalClock(show_seconds=self.config.show_seconds)
        self.menu = SlideMenu(speed=self.config.menu_speed)
        self.ui = UIRenderer(self.config.width, self.config.height, self.config)
        self.voice = VoiceFeedback(self.config)

        self.screen = self.config.start_screen
        self.running = False
        self.last_frame_time = None

    @property
    def screen_titles(self):
        return dict(self.menu.items)

    def set_screen(self, screen_id):
        """
        Cambia de pantalla.

        Raises:
            ValueError: Si la pantalla no existe en el menú
        """
        if screen_id not in self.screen_titles:
            raise ValueError(f"Pantalla desconocida: {screen_id}")
        self.screen = screen_id
        self.voice.speak(self.screen_titles[screen_id])

    def handle_key(self, label):
        """
        Procesa una tecla de la calculadora y actualiza el acumulador.

        Args:
            label (str): "0"-"9", "+", "-", "×", "÷", "=" o "C"

        Returns:
            bool: True si la tecla se reconoció

        Feedback:
            - Verde claro: Dígitos
            - Un color por operación
            - Cian: Resultado
            - Rojo: Borrado
        """
        # ====================================================================
        # NÚMEROS (0-9): Añadir dígito al display
        # ====================================================================
        if len(label) == 1 and label in DIGITS:
            if self.acc.input_digit(label):
                self.ui.show_feedback(f"OK {label}", (100, 255, 100))
                self.voice.speak_digit(label)
            else:
                self.ui.show_feedback(f"MAX {self.config.max_digits} DIGITOS", (60, 180, 255))

        # ====================================================================
        # OPERACIONES (+ - × ÷): Guardar operando y operación pendiente
        # ====================================================================
        elif label in ("+", "-", "×", "÷"):
            op = Operator.from_symbol(label)
            self.acc.select_operator(op)
            msg, color = OPERATOR_FEEDBACK[op]
            self.ui.show_feedback(msg, color)
            self.voice.speak_operator(op)

        # ====================================================================
        # IGUAL (=): Aplicar la operación pendiente
        # ====================================================================
        elif label == "=":
            if self.acc.evaluate():
                result = self.acc.get_display()
                self.ui.show_feedback(f"= {result}", (0, 255, 255), 60)
                self.voice.speak_result(result)

        # ====================================================================
        # BORRAR TODO (C)
        # ====================================================================
        elif label == "C":
            self.acc.clear()
            self.ui.show_feedback("TODO BORRADO", (60, 60, 255))
            self.voice.speak("todo borrado")

        else:
            return False

        self.ui.flash_button(label)
        return True

    def handle_click(self, x, y):
        """
        Procesa un clic del ratón.

        Prioridad:
            1. Menú abierto: opción del menú, o cerrar si se pulsa fuera
            2. Botón de menú de la cabecera
            3. Teclado de la calculadora (solo en la pantalla calculadora)

        Returns:
            bool: True si el clic tuvo efecto
        """
        if self.menu.is_open:
            index = self.ui.menu_item_at(self.menu, x, y)
            if index is not None:
                self.set_screen(self.menu.select(index))
            else:
                self.menu.close()
            return True

        if self.ui.menu_button_hit(x, y):
            self.menu.toggle()
            return True

        if self.screen == 'calculadora':
            label = self.ui.button_at(x, y)
            if label is not None:
                return self.handle_key(label)
        return False

    def handle_keypress(self, key):
        """
        Procesa una tecla de cv2.waitKey.

        Args:
            key (int): Código de tecla (ya enmascarado con & 0xFF)

        Returns:
            bool: False si hay que salir de la aplicación

        Controles:
            - 0-9, + - * x /, Enter o =, c o Backspace: calculadora
            - m: mostrar/ocultar menú (con el menú abierto, 1-2 eligen pantalla)
            - v: activar/desactivar voz
            - ESC o q: salir
        """
        if key == 255:  # Sin tecla
            return True

        if key == KEY_ESC or key == ord('q'):
            return False

        ch = chr(key)

        if ch == 'm':
            self.menu.toggle()
        elif self.menu.is_open and ch in DIGITS:
            index = int(ch) - 1
            if 0 <= index < len(self.menu.items):
                self.set_screen(self.menu.select(index))
        elif ch == 'v':
            self.toggle_voice()
        elif self.screen != 'calculadora':
            pass
        elif ch in DIGITS:
            self.handle_key(ch)
        elif ch in "+-*x/":
            self.handle_key(Operator.from_symbol(ch).value)
        elif key in KEYS_ENTER or ch == '=':
            self.handle_key("=")
        elif key in KEYS_BACKSPACE or ch == 'c':
            self.handle_key("C")
        return True

    def toggle_voice(self):
        enabled = not self.config.voice_enabled
        self.voice.set_enabled(enabled)
        status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
        print(f"🔊 Voz: {status}")
        self.ui.show_feedback(f"VOZ {status}", (0, 255, 255), 60)
        if self.config.voice_enabled:
            self.voice.speak("voz activada")

    def render(self, dt=0.0):
        """
        Dibuja un frame completo de la pantalla activa.

        Args:
            dt (float): Segundos desde el frame anterior (animación del menú)

        Returns:
            np.array: Frame BGR listo para cv2.imshow
        """
        self.menu.update(dt)
        frame = self.ui.new_frame()

        self.ui.draw_header(frame, self.screen_titles[self.screen])
        if self.screen == 'calculadora':
            self.ui.draw_display(frame, self.acc)
            self.ui.draw_keypad(frame)
        else:
            self.ui.draw_clock(frame, self.clock)

        self.ui.draw_feedback(frame)
        self.ui.draw_menu(frame, self.menu, self.screen)
        return frame

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Tick del reloj (cambia el texto una vez por segundo)
            2. Renderizar la pantalla activa y el menú
            3. Mostrar frame y procesar teclado (el ratón llega por callback)
            4. Repetir hasta ESC, 'q' o cerrar la ventana
        """
        print("\n" + "="*60)
        print("CALCULADORA - RELOJ - MENU")
        print("="*60)
        print("\nRaton: pulsa los botones o el icono de menu")
        print("Teclado: 0-9  + - * /  Enter (=)  c (borrar)")
        print("Presiona 'm' para abrir/cerrar el menu")
        print("Presiona 'v' para activar/desactivar voz")
        print("Presiona ESC o 'q' para salir")
        print("="*60 + "\n")

        title = self.config.window_title
        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self._on_mouse)
        print(f"OK Ventana: {self.config.width}x{self.config.height}")

        self.running = True
        self.last_frame_time = time.time()
        delay = self.config.get_frame_delay()

        try:
            while self.running:
                now = time.time()
                dt = now - self.last_frame_time
                self.last_frame_time = now

                self.clock.tick()
                frame = self.render(dt)
                cv2.imshow(title, frame)

                key = cv2.waitKey(delay) & 0xFF
                if not self.handle_keypress(key):
                    break

                # Ventana cerrada con el botón de la barra de título
                if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            self.running = False
            self.voice.shutdown()
            cv2.destroyAllWindows()
            print("\nOK Aplicacion cerrada correctamente")

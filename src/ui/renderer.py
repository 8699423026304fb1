"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos
visuales sobre un frame de numpy y resuelve qué botón hay bajo el ratón.
"""

import cv2
import numpy as np

from config.settings import AppConfig


# Filas del teclado, igual que en pantalla
KEYPAD_ROWS = [
    ["7", "8", "9", "+"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "×"],
    ["C", "0", "=", "÷"],
]

# Colores BGR
COLOR_BG = (30, 30, 30)
COLOR_DIGIT = (230, 130, 30)      # Azul
COLOR_OPERATOR = (0, 150, 255)    # Naranja
COLOR_CLEAR = (60, 50, 230)       # Rojo
COLOR_TEXT = (255, 255, 255)
COLOR_DIM = (170, 170, 170)

# Las fuentes Hershey de OpenCV solo tienen ASCII
ASCII_SYMBOLS = {"×": "x", "÷": "/"}

HEADER_HEIGHT = 64
MENU_BUTTON = (14, 12, 58, 52)    # x1, y1, x2, y2
MENU_WIDTH = 280
MENU_TOP = HEADER_HEIGHT + 24
MENU_ITEM_HEIGHT = 64


def to_ascii(text):
    """Reemplaza × y ÷ por x y / para poder dibujarlos con cv2.putText."""
    for symbol, ascii_symbol in ASCII_SYMBOLS.items():
        text = text.replace(symbol, ascii_symbol)
    return text


def fit_display_text(text, max_w, scale=2.6, min_scale=0.6, thickness=3):
    """
    Ajusta el número del display al ancho disponible.

    Primero reduce la fuente hasta min_scale; si aún no cabe, recorta por la
    izquierda y antepone "..." (se conservan las últimas cifras escritas).

    Returns:
        tuple: (texto, escala, ancho en píxeles)
    """
    font = cv2.FONT_HERSHEY_DUPLEX
    tw = cv2.getTextSize(text, font, scale, thickness)[0][0]
    while tw > max_w and scale > min_scale:
        scale = max(min_scale, scale - 0.2)
        tw = cv2.getTextSize(text, font, scale, thickness)[0][0]

    body = text
    while tw > max_w and len(body) > 1:
        body = body[1:]
        text = "..." + body
        tw = cv2.getTextSize(text, font, scale, thickness)[0][0]
    return text, scale, tw


def button_color(label):
    """Naranja para operaciones e =, rojo para C, azul para dígitos."""
    if label in ("+", "-", "×", "÷", "="):
        return COLOR_OPERATOR
    if label == "C":
        return COLOR_CLEAR
    return COLOR_DIGIT


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica.

    Componentes visuales:
        1. Cabecera: botón de menú (☰) y título de la pantalla
        2. Display: expresión pendiente y número actual alineado a la derecha
        3. Teclado: 4x4 botones
        4. Reloj: hora grande y fecha
        5. Menú lateral deslizante con oscurecimiento del fondo
        6. Feedback: mensajes temporales con fade-out
    """

    def __init__(self, width, height, config=None):
        """
        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (AppConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else AppConfig()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback
        self.pressed = None                  # Botón resaltado (último pulsado)
        self.pressed_timer = 0

        self.display_rect = (20, HEADER_HEIGHT + 16, width - 20, HEADER_HEIGHT + 176)
        self.keypad_rects = self._layout_keypad()

    def _layout_keypad(self):
        """Calcula el rectángulo (x1, y1, x2, y2) de cada botón."""
        gap = 12
        left, right = 20, self.width - 20
        top = self.display_rect[3] + 24
        bottom = self.height - 80
        bw = (right - left - gap * 3) // 4
        bh = (bottom - top - gap * 3) // 4

        rects = []
        for r, row in enumerate(KEYPAD_ROWS):
            for c, label in enumerate(row):
                x1 = left + c * (bw + gap)
                y1 = top + r * (bh + gap)
                rects.append((label, (x1, y1, x1 + bw, y1 + bh)))
        return rects

    def new_frame(self):
        """Frame vacío del tamaño de la ventana."""
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        frame[:] = COLOR_BG
        return frame

    # ------------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------------
    def button_at(self, x, y):
        """
        Args:
            x, y (int): Posición del clic

        Returns:
            str: Etiqueta del botón bajo (x, y), o None
        """
        for label, (x1, y1, x2, y2) in self.keypad_rects:
            if x1 <= x < x2 and y1 <= y < y2:
                return label
        return None

    def menu_button_hit(self, x, y):
        x1, y1, x2, y2 = MENU_BUTTON
        return x1 <= x < x2 and y1 <= y < y2

    def menu_item_at(self, menu, x, y):
        return menu.item_at(x, y, MENU_WIDTH, MENU_ITEM_HEIGHT, MENU_TOP)

    # ------------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------------
    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (None = config.feedback_frames)
        """
        self.feedback_msg = to_ascii(msg)
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_frames

    def flash_button(self, label, frames=6):
        """Resalta un botón unos frames tras pulsarlo."""
        self.pressed = label
        self.pressed_timer = frames

    def draw_feedback(self, img):
        """Mensaje temporal en la parte inferior con fade-out."""
        if self.feedback_timer <= 0:
            return
        self.feedback_timer -= 1
        alpha = min(self.feedback_timer / 20.0, 1.0)

        (tw, th), _ = cv2.getTextSize(self.feedback_msg, cv2.FONT_HERSHEY_DUPLEX, 0.9, 2)
        x = (self.width - tw) // 2
        y = self.height - 30

        overlay = img.copy()
        cv2.rectangle(overlay, (x - 16, y - th - 14), (x + tw + 16, y + 12), (50, 50, 50), -1)
        cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

        color = tuple(int(c * alpha) for c in self.feedback_color)
        cv2.putText(img, self.feedback_msg, (x, y),
                    cv2.FONT_HERSHEY_DUPLEX, 0.9, color, 2)

    # ------------------------------------------------------------------------
    # Cabecera
    # ------------------------------------------------------------------------
    def draw_header(self, img, title):
        """Botón de menú (tres líneas) y título centrado."""
        x1, y1, x2, y2 = MENU_BUTTON
        for i in range(3):
            ly = y1 + 10 + i * 10
            cv2.line(img, (x1 + 6, ly), (x2 - 6, ly), COLOR_TEXT, 3)

        (tw, _), _ = cv2.getTextSize(title, cv2.FONT_HERSHEY_DUPLEX, 0.9, 2)
        cv2.putText(img, title, ((self.width - tw) // 2, 42),
                    cv2.FONT_HERSHEY_DUPLEX, 0.9, COLOR_TEXT, 2)
        cv2.line(img, (0, HEADER_HEIGHT), (self.width, HEADER_HEIGHT), (70, 70, 70), 1)

    # ------------------------------------------------------------------------
    # Calculadora
    # ------------------------------------------------------------------------
    def draw_display(self, img, acc):
        """
        Dibuja el display de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            acc (Accumulator): Acumulador con el estado actual

        Colores del número:
            - Blanco: Número siendo escrito
            - Verde: Resultado tras =

        El tamaño de fuente se reduce hasta que el número cabe en el display;
        si no cabe ni con la fuente mínima, se recorta por la izquierda con "...".
        """
        x1, y1, x2, y2 = self.display_rect

        overlay = img.copy()
        cv2.rectangle(overlay, (x1, y1), (x2, y2), (55, 55, 55), -1)
        cv2.addWeighted(overlay, 0.92, img, 0.08, 0, img)
        cv2.rectangle(img, (x1, y1), (x2, y2), (90, 90, 90), 2)

        # Expresión pendiente (ej: "12 x")
        expr = to_ascii(acc.get_expression())
        if expr:
            (tw, _), _ = cv2.getTextSize(expr, cv2.FONT_HERSHEY_SIMPLEX, 0.9, 2)
            cv2.putText(img, expr, (x2 - 16 - tw, y1 + 44),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, COLOR_DIM, 2)

        display = acc.get_display()
        color = (100, 255, 100) if acc.is_result else COLOR_TEXT

        display, scale, tw = fit_display_text(display, (x2 - x1) - 32)
        cv2.putText(img, display, (x2 - 16 - tw, y2 - 28),
                    cv2.FONT_HERSHEY_DUPLEX, scale, color, 3)

    def draw_keypad(self, img):
        """Dibuja los 16 botones. El último pulsado se dibuja más claro."""
        if self.pressed_timer > 0:
            self.pressed_timer -= 1

        for label, (x1, y1, x2, y2) in self.keypad_rects:
            color = button_color(label)
            if label == self.pressed and self.pressed_timer > 0:
                color = tuple(min(255, c + 60) for c in color)
            cv2.rectangle(img, (x1, y1), (x2, y2), color, -1)

            cx, cy = (x1 + x2) // 2, (y1 + y2) // 2
            if label in ASCII_SYMBOLS:
                self._draw_symbol(img, label, cx, cy)
            else:
                (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_DUPLEX, 1.4, 2)
                cv2.putText(img, label, (cx - tw // 2, cy + th // 2),
                            cv2.FONT_HERSHEY_DUPLEX, 1.4, COLOR_TEXT, 2)

    def _draw_symbol(self, img, label, cx, cy, size=14):
        """Dibuja × y ÷ con líneas (no existen en las fuentes Hershey)."""
        if label == "×":
            cv2.line(img, (cx - size, cy - size), (cx + size, cy + size), COLOR_TEXT, 3)
            cv2.line(img, (cx - size, cy + size), (cx + size, cy - size), COLOR_TEXT, 3)
        elif label == "÷":
            cv2.line(img, (cx - size, cy), (cx + size, cy), COLOR_TEXT, 3)
            cv2.circle(img, (cx, cy - size + 2), 3, COLOR_TEXT, -1)
            cv2.circle(img, (cx, cy + size - 2), 3, COLOR_TEXT, -1)

    # ------------------------------------------------------------------------
    # Reloj
    # ------------------------------------------------------------------------
    def draw_clock(self, img, clock):
        """
        Dibuja la hora grande centrada y la fecha debajo.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            clock (DigitalClock): Reloj con el último tick
        """
        time_text = clock.time_text
        scale = 2.4
        (tw, th), _ = cv2.getTextSize(time_text, cv2.FONT_HERSHEY_DUPLEX, scale, 4)
        while tw > self.width - 40 and scale > 0.8:
            scale -= 0.2
            (tw, th), _ = cv2.getTextSize(time_text, cv2.FONT_HERSHEY_DUPLEX, scale, 4)

        cy = self.height // 2
        cv2.putText(img, time_text, ((self.width - tw) // 2, cy),
                    cv2.FONT_HERSHEY_DUPLEX, scale, COLOR_TEXT, 4)

        # Hershey no tiene tildes: se dibuja la fecha sin ellas
        date_text = _strip_accents(clock.date_text)
        (dw, _), _ = cv2.getTextSize(date_text, cv2.FONT_HERSHEY_SIMPLEX, 0.7, 2)
        cv2.putText(img, date_text, ((self.width - dw) // 2, cy + th + 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, COLOR_DIM, 2)

    # ------------------------------------------------------------------------
    # Menú
    # ------------------------------------------------------------------------
    def draw_menu(self, img, menu, current_screen):
        """
        Dibuja el menú lateral según su progreso de animación.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            menu (SlideMenu): Estado del menú
            current_screen (str): Pantalla activa (se resalta)
        """
        if not menu.is_visible:
            return

        # Oscurecer el resto de la pantalla en proporción al progreso
        overlay = img.copy()
        cv2.rectangle(overlay, (0, 0), (self.width, self.height), (0, 0, 0), -1)
        cv2.addWeighted(overlay, 0.5 * menu.progress, img, 1 - 0.5 * menu.progress, 0, img)

        offset = int(MENU_WIDTH * (menu.progress - 1.0))
        right = offset + MENU_WIDTH
        if right <= 0:
            return
        cv2.rectangle(img, (max(offset, 0), 0), (right, self.height), (45, 45, 45), -1)
        cv2.line(img, (right, 0), (right, self.height), (90, 90, 90), 2)

        cv2.putText(img, "MENU", (offset + 24, HEADER_HEIGHT - 8),
                    cv2.FONT_HERSHEY_DUPLEX, 1.0, (100, 200, 255), 2)

        for i, (screen_id, label) in enumerate(menu.items):
            y1 = MENU_TOP + i * MENU_ITEM_HEIGHT
            y2 = y1 + MENU_ITEM_HEIGHT
            if screen_id == current_screen:
                cv2.rectangle(img, (max(offset, 0), y1), (right, y2), (70, 70, 70), -1)
            cv2.putText(img, f"{i + 1}  {label}", (offset + 24, y1 + 42),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, COLOR_TEXT, 2)


def _strip_accents(text):
    return text.translate(str.maketrans("áéíóúñÁÉÍÓÚÑ", "aeiounAEIOUN"))

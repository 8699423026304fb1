"""
Lógica de calculadora aritmética básica.

Este módulo contiene el acumulador de la calculadora: un búfer de display,
un operando guardado, una operación pendiente y el flag que indica si el
siguiente dígito empieza un número nuevo.

Accumulator.snapshot() devuelve los cuatro campos como tupla; solo sirve
para tests y depuración (comparar estados antes y después de una operación).
"""

import math
from enum import Enum


# ============================================================================
# ENUM: Operator
# Propósito: Las cuatro operaciones binarias de la calculadora
# ============================================================================
class Operator(Enum):
    """Operación binaria seleccionable por el usuario. El valor es el símbolo del botón."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def from_symbol(cls, symbol):
        """
        Convierte un símbolo de botón o de teclado en un Operator.

        Args:
            symbol (str): "+", "-", "×", "÷" o los alias de teclado "*", "x", "/"

        Returns:
            Operator: Operación correspondiente

        Raises:
            ValueError: Si el símbolo no corresponde a ninguna operación
        """
        symbol = _SYMBOL_ALIASES.get(symbol, symbol)
        return cls(symbol)


# Alias de teclado (no se puede escribir × ni ÷ con un teclado normal)
_SYMBOL_ALIASES = {
    "*": "×",
    "x": "×",
    "X": "×",
    "/": "÷",
}


def apply_operation(op, lhs, rhs):
    """
    Aplica una operación a dos operandos.

    Args:
        op (Operator): Operación a aplicar
        lhs (float): Operando izquierdo (el guardado)
        rhs (float): Operando derecho (el del display)

    Returns:
        float: Resultado. La división por cero devuelve 0 en lugar de error,
        y cualquier resultado no finito (desbordamiento) también devuelve 0.
    """
    if op is Operator.ADD:
        result = lhs + rhs
    elif op is Operator.SUBTRACT:
        result = lhs - rhs
    elif op is Operator.MULTIPLY:
        result = lhs * rhs
    elif op is Operator.DIVIDE:
        if rhs == 0:
            return 0.0
        result = lhs / rhs
    else:
        raise ValueError(f"Operación desconocida: {op!r}")

    if not math.isfinite(result):
        return 0.0
    return result


def format_result(value):
    """
    Formatea un número para el display.

    - 42.0 → "42" (enteros sin punto decimal)
    - 0.25 → "0.25" (formato %g, sin número fijo de decimales)
    """
    if float(value).is_integer():
        return str(int(value))
    return "%g" % value


def _parse(text):
    """Convierte el display a float. Devuelve None si no es un número finito."""
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


# ============================================================================
# CLASE: Accumulator
# Propósito: Máquina de estados aritmética de la calculadora
# Responsabilidades:
#   - Construir el número del display dígito a dígito
#   - Guardar el operando izquierdo y la operación pendiente
#   - Evaluar de izquierda a derecha (sin precedencia)
#   - Volver al estado inicial con C
# ============================================================================
class Accumulator:
    """
    Acumulador de la calculadora.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en display_buffer
        2. Usuario selecciona operación → el display pasa a stored_operand
        3. Usuario ingresa el segundo número
        4. Usuario presiona = o encadena otra operación → se aplica la pendiente

    Variables de estado:
        - display_buffer: Texto del número visible (nunca vacío, "0" por defecto)
        - stored_operand: Operando izquierdo esperando resultado
        - pending_operator: Operación esperando el segundo operando
        - reset_on_next_digit: El siguiente dígito reemplaza el display
    """

    def __init__(self, max_digits=None):
        """
        Inicializa el acumulador en estado vacío.

        Args:
            max_digits (int): Longitud máxima del display al escribir dígitos.
                None = sin límite.
        """
        self.max_digits = max_digits
        self.clear()

    def input_digit(self, digit):
        """
        Añade un dígito al display.

        Args:
            digit (int | str): Dígito 0-9

        Returns:
            bool: True si se añadió, False si se alcanzó max_digits

        Raises:
            ValueError: Si digit no es un dígito 0-9
        """
        d = str(digit)
        if len(d) != 1 or d not in "0123456789":
            raise ValueError(f"Dígito inválido: {digit!r}")

        if self.reset_on_next_digit or self.display_buffer == "0":
            self.display_buffer = d
            self.reset_on_next_digit = False
            return True

        if self.max_digits is not None and len(self.display_buffer) >= self.max_digits:
            return False

        self.display_buffer += d
        return True

    def select_operator(self, op):
        """
        Selecciona la operación pendiente.

        Si ya había una operación y un operando guardado, primero se aplica
        la anterior (ej: 2 + 3 + → muestra 5) y el resultado queda como
        operando guardado.

        Args:
            op (Operator): Nueva operación pendiente
        """
        current = _parse(self.display_buffer)
        if current is None:
            return

        if self.pending_operator is not None and self.stored_operand is not None:
            result = apply_operation(self.pending_operator, self.stored_operand, current)
            self.display_buffer = format_result(result)
            self.stored_operand = result
        else:
            self.stored_operand = current

        self.pending_operator = op
        self.reset_on_next_digit = True

    def evaluate(self):
        """
        Aplica la operación pendiente (botón =).

        Returns:
            bool: True si se calculó, False si no había nada pendiente
        """
        current = _parse(self.display_buffer)
        if self.pending_operator is None or self.stored_operand is None or current is None:
            return False

        result = apply_operation(self.pending_operator, self.stored_operand, current)
        self.display_buffer = format_result(result)
        self.stored_operand = None
        self.pending_operator = None
        self.reset_on_next_digit = True
        return True

    def clear(self):
        """Borra TODO el estado (botón C)."""
        self.display_buffer = "0"
        self.stored_operand = None
        self.pending_operator = None
        self.reset_on_next_digit = False

    @property
    def is_result(self):
        """True si el display muestra un resultado que el siguiente dígito reemplazará."""
        return self.reset_on_next_digit and self.pending_operator is None

    def get_display(self):
        return self.display_buffer

    def get_expression(self):
        """
        Expresión parcial para el display secundario.

        Returns:
            str: "12 +" si hay una operación pendiente, "" en otro caso
        """
        if self.pending_operator is None or self.stored_operand is None:
            return ""
        return f"{format_result(self.stored_operand)} {self.pending_operator.value}"

    def snapshot(self):
        """Copia inmutable de los cuatro campos. Ayuda para tests y depuración."""
        return (
            self.display_buffer,
            self.stored_operand,
            self.pending_operator,
            self.reset_on_next_digit,
        )

# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
from app.calculator_app import CalculatorApp
from config.settings import AppConfig


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        python3 src/main.py
        calculadora          (tras pip install .)
    """
    try:
        app = CalculatorApp(AppConfig())
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

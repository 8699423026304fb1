"""Tests del feedback por voz con un motor falso (sin pyttsx3 real)."""

import threading

import pytest

from config.settings import AppConfig
from core.calculator import Operator
from voice.feedback import VoiceFeedback, result_to_speech


class FakeEngine:
    def __init__(self, fail_on=None):
        self.said = []
        self.fail_on = fail_on

    def say(self, text):
        if text == self.fail_on:
            raise RuntimeError("sin audio")
        self.said.append(text)

    def runAndWait(self):
        pass

    def stop(self):
        pass


@pytest.fixture
def voice(monkeypatch):
    v = VoiceFeedback(AppConfig(voice_enabled=False))
    v.engine = FakeEngine()
    v.config.voice_enabled = True
    # Procesar la cola en el mismo hilo para poder comprobarla
    monkeypatch.setattr(v, "speak", lambda text: (v.message_queue.append(text), v._process_queue()))
    return v


@pytest.mark.parametrize("text, spoken", [
    ("12", "12"),
    ("-3", "menos 3"),
    ("0.25", "0 coma 25"),
    ("1e-05", "1 por diez a la menos 05"),
])
def test_result_to_speech(text, spoken):
    assert result_to_speech(text) == spoken


def test_disabled_voice_never_starts_engine():
    v = VoiceFeedback(AppConfig(voice_enabled=False))
    assert v.engine is None
    v.speak("hola")
    assert len(v.message_queue) == 0


def test_speak_digit_operator_and_result(voice):
    voice.speak_digit(5)
    voice.speak_operator(Operator.DIVIDE)
    voice.speak_result("0.25")
    assert voice.engine.said == ["cinco", "entre", "igual a 0 coma 25"]
    assert voice.is_speaking is False


def test_engine_errors_do_not_stop_queue(voice, capsys):
    voice.engine = FakeEngine(fail_on="uno")
    voice.message_queue.extend(["uno", "dos"])
    voice._process_queue()
    assert voice.engine.said == ["dos"]
    assert "Error al reproducir voz" in capsys.readouterr().out


def test_init_failure_disables_voice(monkeypatch, capsys):
    def broken_init():
        raise RuntimeError("sin driver")

    monkeypatch.setattr("voice.feedback.pyttsx3.init", broken_init)
    config = AppConfig(voice_enabled=True)
    v = VoiceFeedback(config)
    assert v.engine is None
    assert config.voice_enabled is False
    assert "No se pudo inicializar" in capsys.readouterr().out


def test_shutdown_clears_queue(voice):
    voice.message_queue.append("tres")
    voice.shutdown()
    assert len(voice.message_queue) == 0


class BlockingEngine(FakeEngine):
    """Motor cuyo runAndWait() bloquea hasta que se llama a stop()."""

    def __init__(self):
        super().__init__()
        self.started = threading.Event()
        self.stopped = threading.Event()

    def runAndWait(self):
        self.started.set()
        self.stopped.wait(5)

    def stop(self):
        self.stopped.set()


def test_shutdown_stops_engine_and_joins_thread():
    v = VoiceFeedback(AppConfig(voice_enabled=False))
    v.engine = BlockingEngine()
    v.config.voice_enabled = True

    v.speak("uno")
    v.speak("dos")
    assert v.engine.started.wait(2)
    thread = v._thread

    v.shutdown(timeout=2)
    assert not thread.is_alive()
    assert v._thread is None
    assert v.is_speaking is False
    assert v.engine.said == ["uno"]


def test_shutdown_without_thread():
    v = VoiceFeedback(AppConfig(voice_enabled=False))
    v.shutdown()
    assert v._thread is None

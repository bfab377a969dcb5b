import logging

from flappy.logger import ConsoleFormatter, setup_logging


def record(name, level, msg):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_setup_installs_single_console_handler():
    root = setup_logging("debug", color=False)
    setup_logging("debug", color=False)

    assert root.name == "flappy"
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ConsoleFormatter)

    root.handlers.clear()
    root.setLevel(logging.NOTSET)


def test_line_shows_module_name_only():
    line = ConsoleFormatter(color=False).format(record("flappy.game_loop", logging.INFO, "Game started"))
    assert line.endswith("[I] game_loop: Game started")
    assert "\033[" not in line


def test_colour_only_for_non_info_levels():
    formatter = ConsoleFormatter(color=True)
    assert "\033[" not in formatter.format(record("flappy.app", logging.INFO, "hello"))

    warning = formatter.format(record("flappy.app", logging.WARNING, "careful"))
    assert warning.startswith("\033[33m")
    assert warning.endswith("\033[0m")

from pomotui.tui.app import PomodoroApp

__all__ = ["PomodoroApp"]

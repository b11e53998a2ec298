"""JetCycle: steady-state Brayton cycle analysis for afterburning jet engines."""

__app_name__ = "jetcycle"
__version__ = "0.1.0"

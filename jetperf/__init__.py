"""JetPerf — airbreathing jet engine cycle performance estimation.

Steady-state, on-design cycle analysis of an afterburning turbojet and a
mixed-exhaust afterburning turbofan.
"""

__app_name__ = "jetperf"
__version__ = "0.1.0"

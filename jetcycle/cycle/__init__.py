"""Engine cycle analysis for JetCycle.

Provides the stage models (inlet, compressor/fan, combustor, turbine,
mixer, afterburner, nozzle) and the turbojet and turbofan pipelines.
"""

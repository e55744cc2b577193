"""Core calculation modules for JetPerf.

This package contains the inputs and shared thermodynamics:
- params: Immutable ParameterSet and input errors
- thermo: Guarded numerics and isentropic station relations
- config: Parameter file persistence (JSON)
"""

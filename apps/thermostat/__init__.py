"""
thermostatd - Thermostat Application

This Django application owns the air-conditioner state machine: the
validated State value, the Thermostat controller that sequences infrared
commands, and the transports that reach the hardware.

License:    Academic Use Only - See LICENSE file
"""

"""
Transports move encoded command frames to the processor.

Only raw TCP is implemented; see :mod:`vdwall.transports.tcp`.
"""

"""Society attendance reporting package.

Organised by feature modules (records, attendance, rounds, feedback, reports)
with a thin CLI on top and a small container wiring the services together.
"""

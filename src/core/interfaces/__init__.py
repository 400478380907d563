"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan servicios o adaptadores.
- Permite inyectar capacidades (p.ej. formato de fechas) y testear con un
  "now" fijo.
"""

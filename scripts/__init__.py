"""Scripts de línea de comandos."""

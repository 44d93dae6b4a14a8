"""Configuración del cliente: settings, constantes y logging."""

"""Servicio de cumplimiento MAHC para lecturas químicas de piscina."""

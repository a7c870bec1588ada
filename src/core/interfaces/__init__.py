"""Contratos (Protocol) que implementan los adaptadores concretos.

El pipeline depende de `EncyclopediaSource`, no de httpx.
"""

"""Barcode Image Service — renders barcodes and QR codes over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""Utility helpers for mdassembler."""

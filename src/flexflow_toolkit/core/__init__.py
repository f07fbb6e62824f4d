"""
Module: core

Purpose:
    Rendering-independent data models for flow conversion.
"""

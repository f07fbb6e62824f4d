"""
Module: utils

Purpose:
    Canvas/plan serialization and debug visualization helpers.
"""

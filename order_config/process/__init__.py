# Path: order_config/process/__init__.py
"""
order_config Process Package

PROCESS layer: manifest matching, specificity scoring and value
resolution.
"""

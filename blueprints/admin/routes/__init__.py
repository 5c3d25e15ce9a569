"""
Admin route modules.
Split into the cms and operations sub-blueprints plus dashboard/audit pages.
"""

"""
Utility helpers shared by the data-access modules.
"""

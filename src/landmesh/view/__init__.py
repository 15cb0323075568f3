"""
The VIEW layer adapts the generated buffers to PyVista and displays them.
"""

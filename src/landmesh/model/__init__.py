"""
The MODEL layer contains pure data structures and the generation logic.
Apart from the PyVista export helper in io.py it has no knowledge of the
visualization. It deals with grid geometry, vertex colors and I/O.
"""

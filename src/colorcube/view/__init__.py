"""
The VIEW layer: QPainter rendering, backing buffer management and the Qt
widgets that host the RGB cube.
"""

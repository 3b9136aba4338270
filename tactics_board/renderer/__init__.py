"""Rendering subpackage.

Turns a board snapshot into a PIL image: void and floor tiles, the
highlighted reachable cells of the current selection, and unit markers.
Tiles are composed as a small NumPy colour array (one pixel per cell) and
scaled up with nearest-neighbour resampling, which keeps cell edges crisp.

See :mod:`tactics_board.renderer.board`.
"""

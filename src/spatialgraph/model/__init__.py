"""
The MODEL layer contains pure data and file formats.
It knows nothing about force laws or the layout loop.
"""

"""Ray casting of spheres and planes to PPM images, with OBJ and MTL readers."""

__version__ = "0.1.0"

__all__ = ["camera", "geometry", "materials", "objreader", "render", "shapes"]
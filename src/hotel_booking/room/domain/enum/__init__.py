from .bed_size import BedSize as BedSize

"""GeoNames spatial index.

Indexes GeoNames point records (name, latitude, longitude, country,
feature class) in a 3-D KD-tree built over unit-sphere projections of
their coordinates, answering exact nearest-neighbour, k-nearest and
radius queries without scanning every record.
"""

__version__ = "0.1.0"

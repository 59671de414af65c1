"""couponcode command line."""

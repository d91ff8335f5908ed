"""Multi-threaded Monte Carlo path tracer with a BVH accelerator."""

__version__ = "0.1.0"

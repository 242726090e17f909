"""Performance benchmarks for labsched.

Microbenchmarks comparing the dense and sparse graph representations on
construction, route finding and scheduling.
"""

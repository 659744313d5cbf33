"""Access EV3 sensor and tacho-motor device directories in a sysfs-style tree."""

__version__ = "0.1.0"
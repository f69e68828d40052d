"""Linked-list benchmark: sorted and unsorted lists, serial, mutex and read-write-lock runners."""

__version__ = "0.1.0"
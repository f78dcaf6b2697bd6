"""Poller class generation for cuckoo sensors.

Renders ``<Title>Poller.java``, the ``CuckooPoller`` implementation that a
cuckoo sensor hands out from ``getPoller()``.  It shares the config and
field constants of the sensor class and stubs ``poll`` and ``getInterval``.
"""

from __future__ import annotations

from .context import ArtifactGenerator, ArtifactKind


class PollerGenerator(ArtifactGenerator):
    """Generates the poller class.  Only invoked for the cuckoo lineage."""

    kind = ArtifactKind.POLLER
    template = "poller.java.j2"

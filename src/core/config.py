"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so the app layer can build it safely.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PACING_SECONDS = 2.0


@dataclass(frozen=True)
class RelayConfig:
    """Settings for the track/playlist relay."""

    # Wait after every playlist track so bursts stay under Telegram's flood limits.
    pacing_seconds: float = DEFAULT_PACING_SECONDS

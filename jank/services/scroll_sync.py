from __future__ import annotations


def sync_scroll(
    source_scroll_top: float,
    source_scroll_height: float,
    source_view_height: float,
    target_scroll_height: float,
    target_view_height: float,
) -> float:
    """
    Map the source's scroll position onto the target proportionally.

    Content shorter than its viewport (non-positive scroll range) counts as
    fraction 0 on the source side and yields 0 on the target side.
    """
    source_range = source_scroll_height - source_view_height
    target_range = target_scroll_height - target_view_height
    if source_range <= 0 or target_range <= 0:
        return 0.0
    fraction = min(1.0, max(0.0, source_scroll_top / source_range))
    return fraction * target_range


class ScrollSynchronizer:
    """Toggleable one-way (editor -> preview) scroll follower."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def set_enabled(self, on: bool) -> None:
        self.enabled = bool(on)

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def sync_if_enabled(
        self,
        source_scroll_top: float,
        source_scroll_height: float,
        source_view_height: float,
        target_scroll_height: float,
        target_view_height: float,
    ) -> float | None:
        if not self.enabled:
            return None
        return sync_scroll(
            source_scroll_top,
            source_scroll_height,
            source_view_height,
            target_scroll_height,
            target_view_height,
        )

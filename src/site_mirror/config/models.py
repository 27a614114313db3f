"""Render configuration model."""

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Options controlling how pages are rendered.

    Attributes:
        breadcrumb_separator: Text placed after each breadcrumb link
        parent_path_segment: Relative path segment that climbs one directory
        index_filename: File name of a generated page inside its directory
        subpage_separator: Text placed between subpage links
        timestamp_format: strftime format for displayed timestamps
        max_ancestor_depth: Upper bound on breadcrumb length
        announcements_limit: Number of announcements listed on an
                             announcements page
    """
    breadcrumb_separator: str = " > "
    parent_path_segment: str = "../"
    index_filename: str = "index.html"
    subpage_separator: str = ", "
    timestamp_format: str = "%b %d, %Y %I:%M %p"
    max_ancestor_depth: int = 100
    announcements_limit: int = 10

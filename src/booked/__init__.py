# ABOUTME: Booked - a per-account book library with reading progress and chapter notes.
# ABOUTME: Package root; the core store lives in booked.library.

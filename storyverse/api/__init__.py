"""HTTP API for Storyverse content guidelines."""

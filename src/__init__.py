"""text2lesson: plain text lesson compiler."""

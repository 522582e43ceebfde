"""Hey Buddy backend: syllabus upload, extraction and study schedule."""

"""
Core application engine for orchestrating the download-and-join process.

`TwilioRecordings` is the session a caller works with; it delegates fetching
to the `FetchOrchestrator` and concatenation to the `Joiner`.
"""

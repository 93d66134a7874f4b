"""resumefit: structured resume parsing and resume-to-job matching.

Turns unstructured resume text into a ParsedResume, then scores it against
job texts and suggests improvements.
"""

__version__ = "0.1.0"

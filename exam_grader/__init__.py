"""Exam Grader - answer checking and result computation for an exam-preparation platform.

Main namespace package:
- exam_grader.answer: Answer normalization, per-type checks, formatting, attempt statistics
- exam_grader.services: Attempt grading and learner progress built on exam_grader.answer
- exam_grader.models: Domain models exchanged with the surrounding application
- exam_grader.core: Configuration, logging and errors
"""

__version__ = "0.1.0"

__all__ = []

"""
Recalls Module - Candidate Retrieval

This module provides the recall layer for video search and suggestions.
A recall asks a VideoRepository for records whose fields contain the raw
query, pre-sorted by views then creation time, and capped.

Recall modes:
- **broad**: "any field contains query" only. The staged condition plan
  (exact, all-words, any-word, fuzzy) is built for logging, not retrieval.
- **staged**: long tokens are also matched fuzzily (chars in order, with
  gaps) against title and description, so typos still retrieve candidates.

Module Structure:
    - base.py: RecallResult data class, VideoRepository contract
    - conditions.py: Staged condition plan, fuzzy pattern and matcher
    - memory.py: MemoryVideoRepository, linear scan over a local corpus
    - word.py: WordRecall, the candidate retriever

Usage:
    from recalls.word import WordRecall
    recall = WordRecall(repository, mode="broad")
    res = recall.recall("react tutorial", tokens=["react", "tutorial"])
"""

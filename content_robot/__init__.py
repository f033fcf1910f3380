"""Content robot: the text stage of a search-term-to-video content pipeline.

Package structure:
    content_robot/config.py          – settings from environment and .env
    content_robot/models.py          – content document and sentence records
    content_robot/text_processor/    – sanitizing, sentence segmentation and limiting
    content_robot/enrichment/        – per-sentence keyword enrichment
    content_robot/services/          – Wikipedia retrieval and Watson NLU keyword analysis
    content_robot/state/             – JSON state document store
    content_robot/pipeline.py        – text stage orchestration
"""

__version__ = "0.1.0"

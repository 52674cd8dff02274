from visualizer.visualization.context import ContextAssembler
from visualizer.visualization.intent import IntentClassifier, PatternIntentClassifier
from visualizer.visualization.models import Mode, TurnOutcome, TurnRequest, TurnResult
from visualizer.visualization.orchestrator import VisualizationOrchestrator
from visualizer.visualization.response_parser import Answer, Update, parse_response

__all__ = [
    "Answer",
    "ContextAssembler",
    "IntentClassifier",
    "Mode",
    "PatternIntentClassifier",
    "TurnOutcome",
    "TurnRequest",
    "TurnResult",
    "Update",
    "VisualizationOrchestrator",
    "parse_response",
]

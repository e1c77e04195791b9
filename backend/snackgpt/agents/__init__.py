from .context_analyzer import ContextAnalyzer
from .eliza_agent import ElizaAgent

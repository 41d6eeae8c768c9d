from .config import LDAConfig
from .corpus import DocumentTermMatrix
from .exceptions import LDAError, InvalidHyperparameter, EmptyCorpus, DegenerateDocument, InvalidTopic, InvalidDocument
from .random_source import RandomSource
from .base import ModelState
from .lda_gibbs import GibbsLDA, fit
from .result import FitResult
from .sweep import SweepRow, sweep, select_topic_count

from .macro import Macro, MacroDefine, MacroTable
from .macro_expander import expand_macros, MAX_ITERATIONS
from .evaluator import evaluate_expression
from .conditional_processor import (
    ConditionalState,
    ConditionalProcessor,
    process_conditionals,
)
from .preprocessor import preprocess

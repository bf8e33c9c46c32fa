from .emitter import DEFAULT_RUNTIME_MODULE, generate_module, render_plans
from .naming import (
    GenerationError,
    base_name,
    builder_name,
    field_name,
    option_class_name,
    to_pascal,
)
from .traversal import NodePlan, plan_node, plan_tree, walk
from .types import FieldPlan, PRIMITIVE_TAGS, classify, plan_field

__all__ = [
    "DEFAULT_RUNTIME_MODULE",
    "FieldPlan",
    "GenerationError",
    "NodePlan",
    "PRIMITIVE_TAGS",
    "base_name",
    "builder_name",
    "classify",
    "field_name",
    "generate_module",
    "option_class_name",
    "plan_field",
    "plan_node",
    "plan_tree",
    "render_plans",
    "to_pascal",
    "walk",
]

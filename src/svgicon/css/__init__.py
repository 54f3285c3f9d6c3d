from svgicon.css.model import AtRule, Comment, Container, Declaration, Node, Root, Rule
from svgicon.css.parser import parse_stylesheet
from svgicon.css.serializer import serialize_stylesheet

__all__ = [
    "parse_stylesheet",
    "serialize_stylesheet",
    "Node",
    "Container",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
]

from domdiffing.dom.capture import RenderedDomExtractor
from domdiffing.dom.nodes import Attr, Node, NodeType
from domdiffing.dom.parser import HtmlParser

__all__ = ["Attr", "HtmlParser", "Node", "NodeType", "RenderedDomExtractor"]

"""
RSS 1.0 writer.

Emits the graph as an RSS 1.0 (RDF Site Summary) document: one channel
describing the configured URL, and one item per typed resource. The item
description lists every object of the resource, one per line.
"""

import logging
from typing import List, Optional, TextIO

from lxml import etree
from rdflib import RDF, RDFS, Graph, Literal, URIRef

from constants import Vocabulary
from shared.models import ConversionOptions, FormatTag

logger = logging.getLogger(__name__)

RDF_NS = str(RDF)
RDFS_NS = str(RDFS)
RSS_NS = Vocabulary.RSS_NAMESPACE

NSMAP = {
    None: RSS_NS,
    "dc": Vocabulary.DC_NAMESPACE,
    "rdf": RDF_NS,
    "rdfs": RDFS_NS,
}

CHANNEL_TITLE = "Exhibit Data"


def _rss(tag: str) -> str:
    return f"{{{RSS_NS}}}{tag}"


def _rdf(tag: str) -> str:
    return f"{{{RDF_NS}}}{tag}"


def _text_element(parent: etree._Element, tag: str, text: Optional[str]) -> etree._Element:
    element = etree.SubElement(parent, _rss(tag))
    element.text = text or ""
    return element


class RSS1p0Writer:
    """Serializes generic data to RSS 1.0."""

    format_tag = FormatTag.RSS1_0
    label = "RSS 1.0 Writer"
    description = "Serializes generic data to RSS 1.0"

    def write(
        self,
        stream: TextIO,
        graph: Graph,
        options: Optional[ConversionOptions] = None,
    ) -> None:
        options = options or ConversionOptions()
        document = self.build_document(graph, options.url)
        serialized = etree.tostring(
            document,
            pretty_print=True,
            xml_declaration=True,
            encoding=options.output_encoding,
        )
        stream.write(serialized.decode(options.output_encoding))
        stream.flush()

    def build_document(self, graph: Graph, url: str) -> etree._Element:
        """Build the rdf:RDF root element for ``graph``."""
        root = etree.Element(_rdf("RDF"), nsmap=NSMAP)

        channel = etree.SubElement(root, _rss("channel"))
        channel.set(_rdf("about"), url)
        _text_element(channel, "title", CHANNEL_TITLE)
        _text_element(channel, "link", url)
        _text_element(channel, "description", f"Exhibit data at {url}")

        item_uris: List[str] = []
        for subject in graph.subjects(RDF.type, None, unique=True):
            if not isinstance(subject, URIRef):
                continue
            root.append(self._build_item(graph, subject))
            item_uris.append(str(subject))

        seq = etree.SubElement(channel, _rdf("Seq"))
        for item_uri in item_uris:
            li = etree.SubElement(seq, _rdf("li"))
            li.set(_rdf("resource"), item_uri)

        logger.info(f"Built RSS feed with {len(item_uris)} items")
        return root

    def _build_item(self, graph: Graph, subject: URIRef) -> etree._Element:
        item = etree.Element(_rss("item"))
        item.set(_rdf("about"), str(subject))

        label = graph.value(subject, RDFS.label)
        _text_element(item, "title", str(label) if isinstance(label, Literal) else None)
        _text_element(item, "link", str(subject))

        description = "".join(f"{obj}\n" for obj in graph.objects(subject, None))
        _text_element(item, "description", description)
        return item

"""Query and transform utilities over ElementTree documents.

Every function takes XML text (or an element), works on a freshly parsed
tree and returns a new string or value. Output documents are indented with
``Settings.xml_indent`` and carry no XML declaration.
"""

from __future__ import annotations

import copy
import csv
import logging
import xml.etree.ElementTree as ET

from .config import get_settings

logger = logging.getLogger(__name__)

ADVENTURE_WORKS_NS = "http://www.adventure-works.com"

_CUSTOMER_COLUMNS = 10


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse(xml: str, *, comments: bool = False) -> ET.Element:
    if comments:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        return ET.fromstring(xml, parser=parser)
    return ET.fromstring(xml)


def _serialize(elem: ET.Element) -> str:
    ET.indent(elem, space=get_settings().xml_indent)
    return ET.tostring(elem, encoding="unicode")


def _detached(elem: ET.Element) -> ET.Element:
    clone = copy.deepcopy(elem)
    clone.tail = None
    return clone


def _sub(parent: ET.Element, tag: str, text: str) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = text
    return child


def _text(elem: ET.Element) -> str:
    """Concatenated text of *elem* and all its descendants."""
    return "".join(elem.itertext())


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------

def create_hierarchy(xml: str) -> str:
    """Group ``Root/Data`` records by their ``Category`` text.

    Each group becomes ``<Group ID="category">`` holding one ``Data`` per
    record with just its ``Quantity`` and ``Price`` children. Groups appear
    in order of first occurrence.
    """
    groups: dict[str, list[ET.Element]] = {}
    for data in _parse(xml).findall("Data"):
        groups.setdefault(data.findtext("Category", default=""), []).append(data)

    root = ET.Element("Root")
    for category, records in groups.items():
        group = ET.SubElement(root, "Group", {"ID": category})
        for data in records:
            out = ET.SubElement(group, "Data")
            for tag in ("Quantity", "Price"):
                child = data.find(tag)
                if child is not None:
                    out.append(_detached(child))
    return _serialize(root)


def get_purchase_orders(xml: str) -> str:
    """Comma-joined numbers of purchase orders shipped to NY."""
    ns = {"aw": ADVENTURE_WORKS_NS}
    number_attr = f"{{{ADVENTURE_WORKS_NS}}}PurchaseOrderNumber"
    type_attr = f"{{{ADVENTURE_WORKS_NS}}}Type"

    numbers = []
    for order in _parse(xml).findall("aw:PurchaseOrder", ns):
        for address in order.findall("aw:Address", ns):
            if address.get(type_attr) == "Shipping" and address.findtext("aw:State", namespaces=ns) == "NY":
                numbers.append(order.get(number_attr, ""))
    return ",".join(numbers)


def read_customers_from_csv(customers: str) -> str:
    """Build a ``Root/Customer`` document from comma-separated rows.

    Columns: CustomerID, CompanyName, ContactName, ContactTitle, Phone,
    Address, City, Region, PostalCode, Country. Blank lines are skipped.
    """
    root = ET.Element("Root")
    lines = [line for line in customers.splitlines() if line.strip()]
    for lineno, fields in enumerate(csv.reader(lines), 1):
        if len(fields) < _CUSTOMER_COLUMNS:
            raise ValueError(
                f"line {lineno}: expected {_CUSTOMER_COLUMNS} fields, got {len(fields)}"
            )
        customer = ET.SubElement(root, "Customer", {"CustomerID": fields[0]})
        _sub(customer, "CompanyName", fields[1])
        _sub(customer, "ContactName", fields[2])
        _sub(customer, "ContactTitle", fields[3])
        _sub(customer, "Phone", fields[4])
        address = ET.SubElement(customer, "FullAddress")
        _sub(address, "Address", fields[5])
        _sub(address, "City", fields[6])
        _sub(address, "Region", fields[7])
        _sub(address, "PostalCode", fields[8])
        _sub(address, "Country", fields[9])
    logger.debug("converted %d customer row(s)", len(root))
    return _serialize(root)


def get_concatenation_string(xml: str) -> str:
    """Concatenate the text of every element under ``Document/Sentence``."""
    return "".join(
        _text(el)
        for sentence in _parse(xml).findall("Sentence")
        for el in sentence
    )


def replace_all_customers_with_contacts(xml: str) -> str:
    """Rename every ``Document/customer`` to ``contact``, keeping its children.

    Anything else directly under ``Document`` is dropped, along with the
    attributes of ``Document`` itself.
    """
    doc = _parse(xml)
    contacts = []
    for customer in doc.findall("customer"):
        contact = ET.Element("contact")
        contact.extend(_detached(child) for child in customer)
        contacts.append(contact)
    doc.clear()
    doc.extend(contacts)
    return _serialize(doc)


def find_channels_ids(xml: str) -> list[int]:
    """Ids of channels with two or more subscribers marked by a DELETE comment."""
    ids = []
    for channel in _parse(xml, comments=True).findall("channel"):
        if len(channel.findall("subscriber")) < 2:
            continue
        if any(node.tag is ET.Comment and (node.text or "").strip() == "DELETE" for node in channel):
            ids.append(int(channel.get("id")))
    return ids


def sort_customers(xml: str) -> str:
    """Sort ``Root/Customers`` by country, then city (stable)."""
    customers = _parse(xml).findall("Customers")
    customers.sort(key=lambda c: (
        c.findtext("FullAddress/Country", default=""),
        c.findtext("FullAddress/City", default=""),
    ))
    root = ET.Element("Root")
    root.extend(_detached(c) for c in customers)
    return _serialize(root)


def get_flatten_string(element: ET.Element) -> str:
    """Serialize *element* without the whitespace between its elements.

    Example::

        <root><element>something</element></root>
    """
    flat = _detached(element)
    for node in flat.iter():
        if node.text is not None and not node.text.strip() and len(node):
            node.text = None
        if node is not flat and node.tail is not None and not node.tail.strip():
            node.tail = None
    return ET.tostring(flat, encoding="unicode")


def get_orders_value(xml: str) -> int:
    """Total value of ``Orders/Order`` entries priced from ``products/product``.

    Raises KeyError when an order references an unknown product id.
    """
    root = _parse(xml)
    prices = {
        product.get("Id"): int(product.get("Value"))
        for product in root.findall("products/product")
    }
    return sum(
        prices[order.findtext("product", default="").strip()]
        for order in root.findall("Orders/Order")
    )

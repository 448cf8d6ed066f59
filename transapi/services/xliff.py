"""XLIFF 1.2 reader and writer.

Every interchange file holds the strings of one domain in one language:

    <xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
      <file original="messages.fr.xliff" source-language="en" target-language="fr" datatype="plaintext">
        <body>
          <trans-unit id="1" resname="hello">
            <source>hello</source>
            <target>Bonjour</target>
          </trans-unit>
        </body>
      </file>
    </xliff>

The domain name is the file name up to its first dot (``messages.fr.xliff``
holds the ``messages`` domain); ``original`` only names a source file and is
ignored. The language comes from ``target-language``, each string name from the
unit's ``resname`` (or ``id``) and its content from ``<target>`` (or
``<source>`` when no target is present).
"""

from dataclasses import dataclass, field
from pathlib import Path
from xml.etree import ElementTree

from transapi.errors import ParseError

XLIFF_NS = 'urn:oasis:names:tc:xliff:document:1.2'
FILE_SUFFIX = '.xliff'

ElementTree.register_namespace('', XLIFF_NS)


@dataclass
class DomainTree:
    """One domain's strings in one language, as exchanged with files."""
    name: str
    language: str
    translations: list[tuple[str, str]] = field(default_factory=list)


def _local(tag):
    return tag.rsplit('}', 1)[-1]


def _q(tag):
    return f'{{{XLIFF_NS}}}{tag}'


def _child(element, name):
    for child in element:
        if _local(child.tag) == name:
            return child
    return None


def _text(element):
    return ''.join(element.itertext())


def check_domain_name(name):
    """Reject domain names that are empty or could leave an export directory."""
    if not name or name in ('.', '..') or '/' in name or '\\' in name:
        raise ParseError(f"Invalid domain name '{name}'")
    return name


def parse_string(data, name) -> DomainTree:
    """Parse XLIFF content holding the strings of domain ``name``."""
    check_domain_name(name)

    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as e:
        raise ParseError(f"Malformed XLIFF: {e}") from e

    if _local(root.tag) != 'xliff':
        raise ParseError(f"Expected <xliff> root element, found <{_local(root.tag)}>")

    files = [child for child in root if _local(child.tag) == 'file']
    if not files:
        raise ParseError("XLIFF document has no <file> element")
    if len(files) > 1:
        raise ParseError(f"XLIFF document for domain '{name}' has {len(files)} <file> elements, expected one")
    file_el = files[0]

    language = file_el.get('target-language') or file_el.get('source-language')
    if not language:
        raise ParseError(f"XLIFF file for domain '{name}' declares no language")

    tree = DomainTree(name=name, language=language)
    for unit in file_el.iter():
        if _local(unit.tag) != 'trans-unit':
            continue
        string_name = unit.get('resname') or unit.get('id')
        if not string_name:
            raise ParseError(f"<trans-unit> without resname or id in domain '{name}'")

        target = _child(unit, 'target')
        if target is None:
            target = _child(unit, 'source')
        content = _text(target) if target is not None else ''
        tree.translations.append((string_name, content))

    return tree


def parse_file(path) -> DomainTree:
    """Parse an XLIFF file; the domain is the file name up to its first dot."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ParseError(f"Could not read {path}: {e}") from e
    return parse_string(data, path.name.split('.', 1)[0])


def serialize(tree: DomainTree, source_language='en') -> bytes:
    root = ElementTree.Element(_q('xliff'), {'version': '1.2'})
    file_el = ElementTree.SubElement(root, _q('file'), {
        'original': file_name(tree),
        'source-language': source_language,
        'target-language': tree.language,
        'datatype': 'plaintext',
    })
    body = ElementTree.SubElement(file_el, _q('body'))

    for index, (name, content) in enumerate(tree.translations, start=1):
        unit = ElementTree.SubElement(body, _q('trans-unit'), {'id': str(index), 'resname': name})
        ElementTree.SubElement(unit, _q('source')).text = name
        ElementTree.SubElement(unit, _q('target')).text = content

    ElementTree.indent(root)
    return ElementTree.tostring(root, encoding='utf-8', xml_declaration=True)


def file_name(tree: DomainTree) -> str:
    return f'{tree.name}.{tree.language}{FILE_SUFFIX}'


def write_file(tree: DomainTree, directory, source_language='en') -> Path:
    """Write the tree as ``<domain>.<language>.xliff`` inside directory."""
    check_domain_name(tree.name)
    path = Path(directory) / file_name(tree)
    path.write_bytes(serialize(tree, source_language))
    return path

"""
Tests for the XLIFF reader and writer.
"""

import pytest

from transapi.errors import ParseError
from transapi.services import xliff

SAMPLE = b"""<?xml version="1.0" encoding="utf-8"?>
<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
  <file original="file.ext" source-language="en" target-language="fr" datatype="plaintext">
    <body>
      <trans-unit id="1" resname="hello">
        <source>hello</source>
        <target>Bonjour</target>
      </trans-unit>
      <group id="farewells">
        <trans-unit id="bye">
          <source>bye</source>
          <target>Au revoir</target>
        </trans-unit>
      </group>
      <trans-unit id="3" resname="untranslated">
        <source>Not translated yet</source>
      </trans-unit>
    </body>
  </file>
</xliff>
"""


class TestParse:

    def test_parse_reads_domain_language_and_units(self):
        tree = xliff.parse_string(SAMPLE, 'messages')

        assert tree.name == 'messages'
        assert tree.language == 'fr'
        assert tree.translations == [
            ('hello', 'Bonjour'),
            ('bye', 'Au revoir'),
            ('untranslated', 'Not translated yet'),
        ]

    def test_parse_without_namespace(self):
        data = b"""<xliff version="1.2"><file target-language="de">
            <body><trans-unit resname="oops"><target>Hoppla</target></trans-unit></body>
        </file></xliff>"""

        tree = xliff.parse_string(data, 'errors')

        assert (tree.name, tree.language) == ('errors', 'de')
        assert tree.translations == [('oops', 'Hoppla')]

    def test_domain_name_comes_from_file_name(self, tmp_path):
        path = tmp_path / 'validators.fr.xliff'
        path.write_bytes(SAMPLE)

        tree = xliff.parse_file(path)

        assert tree.name == 'validators'

    def test_original_path_is_ignored(self, tmp_path):
        path = tmp_path / 'messages.fr.xliff'
        path.write_bytes(SAMPLE.replace(b'original="file.ext"', b'original="../src/app/app.component.html"'))

        tree = xliff.parse_file(path)

        assert tree.name == 'messages'

    @pytest.mark.parametrize('name', ['', '..', 'src/app', '..\\escaped'])
    def test_invalid_domain_name_raises_parse_error(self, name):
        with pytest.raises(ParseError, match='Invalid domain name'):
            xliff.parse_string(SAMPLE, name)

    def test_several_file_elements_raise_parse_error(self):
        data = b"""<xliff version="1.2">
            <file target-language="fr"><body/></file>
            <file target-language="de"><body/></file>
        </xliff>"""

        with pytest.raises(ParseError, match='2 <file> elements'):
            xliff.parse_string(data, 'messages')

    def test_malformed_xml_raises_parse_error(self):
        with pytest.raises(ParseError):
            xliff.parse_string(b'<xliff><file>', 'messages')

    def test_missing_language_raises_parse_error(self):
        with pytest.raises(ParseError, match='declares no language'):
            xliff.parse_string(b'<xliff><file><body/></file></xliff>', 'messages')

    def test_wrong_root_element_raises_parse_error(self):
        with pytest.raises(ParseError):
            xliff.parse_string(b'<html><body/></html>', 'messages')

    def test_unreadable_file_raises_parse_error(self, tmp_path):
        with pytest.raises(ParseError):
            xliff.parse_file(tmp_path / 'missing.fr.xliff')


class TestSerialize:

    def test_written_file_parses_back_to_the_same_tree(self, tmp_path):
        tree = xliff.DomainTree(
            name='messages',
            language='fr',
            translations=[('hello', 'Bonjour'), ('greeting', '  Salut <b>&</b> toi  '), ('empty', '')],
        )

        path = xliff.write_file(tree, tmp_path)

        assert path.name == 'messages.fr.xliff'
        assert xliff.parse_file(path) == tree

    def test_serialize_declares_source_and_target_language(self):
        tree = xliff.DomainTree(name='messages', language='de', translations=[('hello', 'Hallo')])

        data = xliff.serialize(tree, source_language='en')

        assert data.startswith(b"<?xml version='1.0' encoding='utf-8'?>")
        assert b'source-language="en"' in data
        assert b'target-language="de"' in data

    def test_write_refuses_names_outside_directory(self, tmp_path):
        out = tmp_path / 'out'
        out.mkdir()
        tree = xliff.DomainTree(name='../escaped', language='fr', translations=[('hello', 'Bonjour')])

        with pytest.raises(ParseError):
            xliff.write_file(tree, out)

        assert not (tmp_path / 'escaped.fr.xliff').exists()

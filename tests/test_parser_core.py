from datetime import datetime

from gedcom_lossless import GEDCOMParser, parse_gedcom
from gedcom_lossless.config import GLConfig
from gedcom_lossless.diagnostics import DiagnosticLevel
from gedcom_lossless.friendly.entities import InlineNote, MediaReference, NoteReference


def test_parse_sample_counts(sample_text):
    result = parse_gedcom(sample_text)

    assert result.meta.source_format == "gedcom55"
    assert isinstance(result.meta.parsed_at, datetime)
    assert result.meta.line_count == 79
    assert result.meta.record_count == 9
    assert len(result.canonical.records) == 9
    assert result.canonical.header is not None
    assert result.canonical.trailer is True
    assert result.friendly.counts() == {
        "individuals": 3,
        "families": 1,
        "sources": 1,
        "media": 1,
        "repositories": 1,
        "notes": 1,
    }


def test_parse_sample_header_is_lossless(sample_text):
    header = parse_gedcom(sample_text).canonical.header

    assert header.lineno == 1
    assert header.find_first("SOUR").value == "Ancestry.com Family Trees"
    gedc = header.find_first("GEDC")
    assert gedc.find_first("VERS").value == "5.5.1"
    assert gedc.find_first("FORM").value == "LINEAGE-LINKED"


def test_parse_sample_malformed_line_diagnostic(sample_text):
    result = parse_gedcom(sample_text)

    assert len(result.diagnostics) == 1
    diag = result.diagnostics.items[0]
    assert diag.level is DiagnosticLevel.WARNING
    assert diag.lineno == 77
    assert diag.raw == "not a valid line"

    # The bad line does not disturb the record before it.
    subm = result.canonical.records["@SUB1@"]
    assert [c.tag for c in subm.children] == ["NAME"]


def test_parse_sample_individual(sample_text):
    john = parse_gedcom(sample_text).friendly.get_individual("@I1@")

    assert john.lineno == 8
    assert john.display_name == "John Smith Jr."
    assert john.given_name == "John"
    assert john.surname == "Smith"
    assert john.suffix == "Jr."
    assert john.sex == "M"
    assert john.famc == ["@F2@"]
    assert john.fams == ["@F1@"]

    assert john.birth.date == "12 MAR 1850"
    assert john.birth.place == "Springfield, Sangamon, Illinois, USA"
    citation = john.birth.sources[0]
    assert citation.source == "@S1@"
    assert citation.page == "Page 14, entry 27"
    assert citation.quality == "3"
    assert citation.data.text == ["Born to Adam Smith\nand Mary Jones"]
    assert citation.data.urls == ["https://example.org/records/1850"]

    assert john.death.date == "4 JUL 1910"
    assert john.burial.is_placeholder
    assert [e.type for e in john.events] == ["BIRT", "DEAT", "OCCU"]

    assert john.media == [MediaReference(ref="@O1@")]
    assert john.notes[0] == NoteReference(ref="@N1@")
    assert john.notes[1] == InlineNote(text="Served in the militia\n1861-1865", lineno=34)
    assert john.custom_tags == {
        "_APID": "1,7602::1234",
        "_MILT": "Union Army\n12th Illinois",
    }


def test_parse_sample_unnamed_individual(sample_text):
    friendly = parse_gedcom(sample_text).friendly

    assert friendly.get_individual("@I2@").display_name == "Mary Brown"
    nameless = friendly.get_individual("@I3@")
    assert nameless.display_name == "Unknown"
    assert nameless.famc == ["@F1@"]


def test_parse_sample_family_source_repository_media_note(sample_text):
    friendly = parse_gedcom(sample_text).friendly

    fam = friendly.get_family("@F1@")
    assert (fam.husband, fam.wife, fam.children) == ("@I1@", "@I2@", ["@I3@"])
    assert fam.marriage.date == "1875"
    assert fam.marriage.place == "Peoria, Illinois"
    assert fam.sources[0].source == "@S1@"
    assert fam.custom_tags == {"_STAT": "Married"}

    source = friendly.get_source("@S1@")
    assert source.title == "Illinois Births, 1800-1900"
    assert source.author == "State Archives"
    assert source.publisher == "Springfield"
    assert source.repository == "@R1@"
    assert source.custom_tags == {"_APID": "1,2345::0"}

    repo = friendly.get_repository(source.repository)
    assert repo.name == "Illinois State Archives"
    assert repo.address == "Margaret Cross Norton Building\nSpringfield, IL"

    media = friendly.get_media("@O1@")
    assert media.title == "Portrait of John"
    assert media.file.path == "photos/john.jpg"
    assert media.mime_type == "jpg"
    assert media.file.media_type == "photo"
    assert media.custom_tags == {"_PRIM": "Y"}

    note = friendly.get_note("@N1@")
    assert note.text == "A shared note\nspanning two lines"


def test_parse_sample_unresolved_links_are_kept(sample_text):
    result = parse_gedcom(sample_text)

    assert result.friendly.get_family("@F2@") is None
    assert "@SUB1@" in result.canonical.records
    assert result.canonical.source_node("@I1@").tag == "INDI"


def test_parse_is_idempotent(sample_text):
    first = parse_gedcom(sample_text).to_dict()
    second = parse_gedcom(sample_text).to_dict()

    first["meta"].pop("parsed_at")
    second["meta"].pop("parsed_at")
    assert first == second


def test_parse_empty_input():
    result = parse_gedcom("")

    assert result.canonical.header is None
    assert result.canonical.records == {}
    assert result.canonical.trailer is False
    assert result.meta.line_count == 0
    assert result.meta.record_count == 0
    assert len(result.diagnostics) == 0
    assert all(v == 0 for v in result.friendly.counts().values())


def test_parse_line_endings_are_equivalent():
    lf = "0 HEAD\n0 @N1@ NOTE Hello\n1 CONT World!\n0 TRLR\n"

    for text in (lf, lf.replace("\n", "\r\n"), lf.replace("\n", "\r")):
        result = parse_gedcom(text)
        assert result.meta.line_count == 4
        assert result.friendly.get_note("@N1@").text == "Hello\nWorld!"


def test_parse_duplicate_record_last_wins():
    text = "0 @I1@ INDI\n1 NAME First /One/\n0 @I1@ INDI\n1 NAME Second /Two/\n"

    result = parse_gedcom(text)

    assert result.meta.record_count == 1
    assert result.canonical.records["@I1@"].lineno == 3
    assert result.friendly.get_individual("@I1@").display_name == "Second Two"


def test_parse_missing_trailer():
    result = parse_gedcom("0 HEAD\n0 @I1@ INDI\n")
    assert result.canonical.trailer is False
    assert result.meta.record_count == 1


def test_parser_uses_injected_config():
    cfg = GLConfig({"parser": {"source_format": "gedcom551"}})
    result = GEDCOMParser(config=cfg).parse("0 HEAD\n0 TRLR\n")
    assert result.meta.source_format == "gedcom551"


def test_parser_uses_injected_custom_tag_prefix():
    cfg = GLConfig({"parser": {"custom_tag_prefix": "X"}})

    result = GEDCOMParser(config=cfg).parse("0 @I1@ INDI\n1 XFOO bar\n1 _APID 1\n")

    assert result.friendly.get_individual("@I1@").custom_tags == {"XFOO": "bar"}


def test_parser_instance_is_reusable():
    parser = GEDCOMParser()

    a = parser.parse("0 @I1@ INDI\nbroken\n")
    b = parser.parse("0 @I2@ INDI\n")

    assert list(a.canonical.records) == ["@I1@"]
    assert len(a.diagnostics) == 1
    assert list(b.canonical.records) == ["@I2@"]
    assert len(b.diagnostics) == 0


def test_parse_minimal_document():
    text = (
        "0 HEAD\n"
        "0 @I1@ INDI\n"
        "1 NAME Jane /Doe/\n"
        "1 BIRT\n"
        "2 DATE 1 JAN 1900\n"
        "2 PLAC Boston\n"
        "0 TRLR\n"
    )

    result = parse_gedcom(text)

    assert result.meta.record_count == 1
    assert result.canonical.trailer is True
    jane = result.friendly.get_individual("@I1@")
    assert jane.display_name == "Jane Doe"
    assert jane.birth.date == "1 JAN 1900"
    assert jane.birth.place == "Boston"

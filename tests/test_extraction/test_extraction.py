"""Tests for class usage extraction."""

import pytest

from stylesweep.errors import UnknownDialectError
from stylesweep.extraction import dialect_class_attributes, extract_class_names
from stylesweep.stylesheet import optimize


class TestExtractClassNames:
    def test_literal_and_conditional(self):
        markup = """
        <div className="a b">
          <span className={cond ? 'c' : 'd'} />
        </div>
        """
        assert extract_class_names(markup) == {"a", "b", "c", "d"}

    def test_braced_single_literal(self):
        assert extract_class_names("<p className={'x y'}>") == {"x", "y"}

    def test_single_quoted_value(self):
        assert extract_class_names("<p className='solo'>") == {"solo"}

    def test_multiple_whitespace(self):
        assert extract_class_names('<p className="  one\ttwo   three ">') == {"one", "two", "three"}

    def test_duplicates_collapse(self):
        markup = '<a className="btn"/><b className="btn primary"/><i className={"btn"}/>'
        assert extract_class_names(markup) == {"btn", "primary"}

    def test_logical_and_expression(self):
        assert extract_class_names("<li className={active && 'is-active'}>") == {"is-active"}

    def test_dynamic_names_not_detected(self):
        assert extract_class_names("<p className={styles.box}>") == set()
        assert extract_class_names("<p className={`btn-${size}`}>") == set()

    def test_no_classes(self):
        assert extract_class_names("") == set()
        assert extract_class_names("<div id='x'>") == set()

    def test_plain_class_ignored_by_default(self):
        assert extract_class_names('<div class="a">') == set()

    def test_class_attribute(self):
        markup = '<div class="a b" data-class="nope"><span :class="c"></span></div>'
        assert extract_class_names(markup, attributes=("class",)) == {"a", "b"}


class TestDialectClassAttributes:
    @pytest.mark.parametrize(
        "dialect, expected",
        [
            ("jsx", ("className",)),
            ("tsx", ("className",)),
            ("js", ("className",)),
            ("html", ("class",)),
            ("php", ("class",)),
            ("vue", ("class",)),
        ],
    )
    def test_attributes(self, dialect, expected):
        assert dialect_class_attributes(dialect) == expected

    def test_unknown(self):
        with pytest.raises(UnknownDialectError):
            dialect_class_attributes("sass")


class TestExtractThenOptimize:
    def test_unused_rules_dropped(self):
        markup = '<nav className="menu"><a className={open ? "item open" : "item"}>x</a></nav>'
        css = ".menu{display:flex}.item{padding:0}.open{color:red}.footer{margin:0}"
        used = extract_class_names(markup)
        assert optimize(css, used) == ".menu{display:flex;}.item{padding:0;}.open{color:red;}"

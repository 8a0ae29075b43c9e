import pytest

from electrode import AnnotationMeta, Singleton, decorate, get_annotation_meta


def test_annotation_meta_immutable():
    """Tests that AnnotationMeta is immutable."""
    meta = AnnotationMeta(_component="svc", _annotations={"@require": ["a"]})
    with pytest.raises(AttributeError):
        meta._component = "other"
    with pytest.raises(AttributeError):
        meta._annotations = {}


def test_annotation_meta_copy_on_access_and_unchanged():
    """
    Tests that the annotation mapping and its lists are returned as copies
    and are unchanged by external mutations.
    """
    meta = AnnotationMeta(
        _component="svc", _annotations={"@require": ["a", "b"], "@singleton": True}
    )

    a1 = meta._annotations
    a1["@singleton"] = False
    a1["@require"].append("x")
    a2 = meta._annotations
    assert a2 == {"@require": ["a", "b"], "@singleton": True}
    assert a1 is not a2
    assert meta.requires == ["a", "b"]
    assert meta.requires is not meta.requires


def test_annotation_meta_copies_its_input():
    """Mutating the mapping passed at creation does not leak into the record."""
    requires = ["a"]
    source = {"@require": requires}
    meta = AnnotationMeta(_component="svc", _annotations=source)

    requires.append("b")
    source["@singleton"] = True
    assert meta._annotations == {"@require": ["a"]}


def test_annotation_meta_defaults():
    meta = AnnotationMeta(_component="svc", _annotations={})
    assert meta.requires == []
    assert meta.singleton is False


def test_redecorating_replaces_the_record():
    def service(database):
        return database

    decorate(service)
    first = get_annotation_meta(service)
    decorate(service, Singleton)
    second = get_annotation_meta(service)

    assert first is not second
    assert first.singleton is False
    assert second.singleton is True
    assert second._component.endswith("service")

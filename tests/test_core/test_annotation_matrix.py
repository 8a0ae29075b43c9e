import pandas as pd
from pandas.testing import assert_frame_equal

from electrode.core import AnnotationMatrix
from electrode.options import set_electrode_option


def test_annotation_matrix_build():
    components = {
        "svc": {"@require": ["db", "cache"], "@singleton": True},
        "repo": {"@require": ["db"]},
    }

    expected = pd.DataFrame(
        {
            "repo": ["", "required", ""],
            "svc": ["required", "required", "yes"],
        },
        index=["cache", "db", "@singleton"],
        columns=["repo", "svc"],
    )
    assert_frame_equal(AnnotationMatrix(components).build(), expected)


def test_annotation_matrix_false_flag_is_empty():
    components = {"svc": {"@require": [], "@singleton": False}}

    expected = pd.DataFrame({"svc": [""]}, index=["@singleton"], columns=["svc"])
    assert_frame_equal(AnnotationMatrix(components).build(), expected)


def test_annotation_matrix_empty():
    assert AnnotationMatrix({}).build().empty


def test_annotation_matrix_uses_configured_requires_key():
    set_electrode_option("requires_key", "@inject")
    components = {"svc": {"@inject": ["db"]}}

    expected = pd.DataFrame({"svc": ["required"]}, index=["db"], columns=["svc"])
    assert_frame_equal(AnnotationMatrix(components).build(), expected)

from liteid.utils.errors import ConfigurationError, LiteIDError, ProblemDetail, UnknownVariantError


def test_problem_detail_model_dump_drops_empty_fields():
    problem = ProblemDetail(title="Error", status=400, detail="Bad")
    payload = problem.model_dump()
    assert payload == {"title": "Error", "status": 400, "detail": "Bad", "type": "about:blank"}


def test_liteid_error_wraps_problem():
    error = UnknownVariantError("Oops", extra={"variant": "x"})
    assert isinstance(error, LiteIDError)
    assert isinstance(error, ValueError)
    assert error.problem.status == 400
    assert error.problem.extra == {"variant": "x"}


def test_configuration_error_defaults():
    error = ConfigurationError("Broken")
    assert error.problem.status == 500
    assert error.problem.type == "urn:liteid:configuration"

"""Tests for operation-specific Rich renderers."""

from condperiod.domain.period import ConditionalPeriod
from condperiod.output.renderers import period_table, render_result
from condperiod.services.result import ServiceError, ServiceResult
from condperiod.services.rules import describe_period

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _described(*texts: str) -> list[dict[str, object]]:
    return [describe_period(ConditionalPeriod.parse(t), i) for i, t in enumerate(texts)]


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("check", "FORMAT_ERROR", "Invalid string format"))
        assert output.startswith("ERROR")
        assert "check" in output
        assert "Invalid string format" in output
        assert "FORMAT_ERROR" not in output

    def test_verbose_shows_code_and_detail(self) -> None:
        output = render_result(_err("find", "TYPE_ERROR", "Bad", value="P3D"), verbose=True)
        assert "code: TYPE_ERROR" in output
        assert "value: P3D" in output

    def test_brackets_are_not_markup(self) -> None:
        output = render_result(_err("check", "TYPE_ERROR", "Given: [bold]list[/bold]"))
        assert "[bold]list[/bold]" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="find"))


# ── find ──────────────────────────────────────────────────────────────


class TestFindRenderer:
    def test_match(self) -> None:
        data = {"value": "4", "matched": True, **_described("C3-5P10D")[0]}
        output = render_result(_ok("find", **data))
        assert "OK" in output
        assert "period: C3-5P10D" in output
        assert "result: P10D" in output
        assert "lower" not in output

    def test_verbose_match(self) -> None:
        data = {"value": "4", "matched": True, **_described("C3-5P10D")[0]}
        output = render_result(_ok("find", **data), verbose=True)
        assert "lower: 3" in output
        assert "kind: category" in output
        assert f"id: {data['id']}" in output

    def test_no_match(self) -> None:
        output = render_result(_ok("find", value="12", matched=False))
        assert "value: 12" in output
        assert "matched: False" in output


# ── show ──────────────────────────────────────────────────────────────


class TestShowRenderer:
    def test_table(self) -> None:
        periods = _described("DP1DP2DP1Y", "DP3DP0DP2Y")
        output = render_result(_ok("show", count=2, periods=periods))
        assert "Lower" in output
        assert "P2Y" in output
        assert "∞" in output
        assert "ID" not in output

    def test_empty(self) -> None:
        assert "(no periods)" in render_result(_ok("show", count=0, periods=[]))

    def test_verbose_adds_id_column(self) -> None:
        table = period_table(_described("C1-2P1D"), verbose=True)
        assert [c.header for c in table.columns][-1] == "ID"


# ── convert / generic ────────────────────────────────────────────────


class TestConvertRenderer:
    def test_raw_output(self) -> None:
        output = render_result(_ok("convert", format="json", output='["C1-2P1D"]'))
        assert output == '["C1-2P1D"]'


class TestGenericRenderer:
    def test_check(self) -> None:
        output = render_result(_ok("check", kind="category", count=3, canonical="C1-2P1D"))
        assert "OK" in output
        assert "count: 3" in output
        assert "canonical: C1-2P1D" in output

    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", items=[1, 2]))
        assert "items: [1,2]" in output

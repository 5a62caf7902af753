"""Integration tests for the console demo driver"""

from finaurora_gateway.demo import SAMPLE_APPLICANTS, main, run_demo


def test_run_demo_reference_applicants():
    """Test the three reference applicants at 24% over 36 months"""
    assert run_demo() == [
        "Cliente: Ana Pérez → Aprobado: false",
        "Cliente: Luis Gómez → Aprobado: true",
        "Cliente: María López → Aprobado: true",
    ]


def test_run_demo_custom_terms():
    """Test a longer zero-rate loan still approves the affordable applicants"""
    lines = run_demo(SAMPLE_APPLICANTS[1:], annual_rate_percent=0.0, term_months=60)

    assert lines == [
        "Cliente: Luis Gómez → Aprobado: true",
        "Cliente: María López → Aprobado: true",
    ]


def test_main_prints_report(capsys, monkeypatch):
    """Test main prints one line per applicant"""
    monkeypatch.setattr("finaurora_gateway.demo.setup_logging", lambda *args, **kwargs: None)

    main()

    output = capsys.readouterr().out.splitlines()
    assert "Cliente: Ana Pérez → Aprobado: false" in output
    assert "Cliente: Luis Gómez → Aprobado: true" in output
    assert "Cliente: María López → Aprobado: true" in output

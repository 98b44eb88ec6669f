"""
Tests for the command-line interface.
"""

from typer.testing import CliRunner

from fraccalc.cli import app

runner = CliRunner()


class TestPromptLoop:
    """Test the interactive prompt loop."""
    
    def test_banner_and_exit(self):
        result = runner.invoke(app, [], input="exit\n")
        assert result.exit_code == 0
        assert "Fraction/Decimal Calculator" in result.stdout
        assert "Type 'exit' to quit." in result.stdout
    
    def test_fraction_result(self):
        result = runner.invoke(app, [], input="1/2 + 1/4\nexit\n")
        assert result.exit_code == 0
        assert "= 3/4 (≈ 0.75)" in result.stdout
    
    def test_decimal_result(self):
        result = runner.invoke(app, [], input="10 * 5\nexit\n")
        assert "= 50 (≈ 50)" in result.stdout
    
    def test_percentage_query(self):
        result = runner.invoke(app, [], input="what percent of 25 is 5?\nexit\n")
        assert "= 20%" in result.stdout
    
    def test_exit_is_case_insensitive(self):
        result = runner.invoke(app, [], input="EXIT\n10 * 5\n")
        assert result.exit_code == 0
        assert "= 50" not in result.stdout
    
    def test_error_does_not_stop_loop(self):
        result = runner.invoke(app, [], input="3 + + 4\n3 + 4\nexit\n")
        assert result.exit_code == 0
        assert "Error:" in result.stdout
        assert "= 7 (≈ 7)" in result.stdout
    
    def test_huge_result_reports_error(self):
        result = runner.invoke(app, [], input="1" + "0" * 305 + " / 1\n2 + 2\nexit\n")
        assert result.exit_code == 0
        assert "Error: Result is too large" in result.stdout
        assert "= 4 (≈ 4)" in result.stdout
    
    def test_unicode_digit_does_not_hang(self):
        result = runner.invoke(app, [], input="\u0663 + 1\nexit\n")
        assert result.exit_code == 0
        assert "Error:" in result.stdout
    
    def test_division_by_zero_reports_error(self):
        result = runner.invoke(app, [], input="5 / 0\nexit\n")
        assert result.exit_code == 0
        assert "Error: Division by zero" in result.stdout
    
    def test_end_of_input_ends_loop(self):
        result = runner.invoke(app, [], input="2 + 2\n")
        assert result.exit_code == 0
        assert "= 4 (≈ 4)" in result.stdout
    
    def test_repl_command_strict(self):
        result = runner.invoke(app, ["repl", "--strict"], input="2 $ 2\nexit\n")
        assert result.exit_code == 0
        assert "Error: Unexpected character" in result.stdout


class TestEvalCommand:
    """Test one-shot evaluation."""
    
    def test_eval_fraction(self):
        result = runner.invoke(app, ["eval", "3/4 * 2"])
        assert result.exit_code == 0
        assert "= 3/2 (≈ 1.5)" in result.stdout
    
    def test_eval_percentage(self):
        result = runner.invoke(app, ["eval", "what percent of 25 is 5?"])
        assert result.exit_code == 0
        assert "= 20%" in result.stdout
    
    def test_eval_error_exit_code(self):
        result = runner.invoke(app, ["eval", ")4("])
        assert result.exit_code == 1
        assert "Error:" in result.stdout

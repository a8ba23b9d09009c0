import logging

import click

from core.calculator import calc_number_of_payments, solve_for_principal, solve_for_rate
from core.comparison import compare_with_annuity, principal_grid, principal_sensitivity
from core.errors import AmortizationError
from core.schedule_generator import generate_amortization_schedule, summarize_schedule
from data_manager.data_validator import (
    validate_rate_solver_inputs,
    validate_simulation_inputs,
    validate_solver_inputs,
)
from utils.formatters import fmt_amount, fmt_periods, fmt_rate


def _check(result):
    ok, msg = result
    if not ok:
        raise click.UsageError(msg)


@click.group()
@click.option('--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """A CLI for the loan principal solver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

@cli.command('number-of-payments')
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--interest-rate', type=float, required=True, help='Interest rate per period (0.01 = 1%)')
@click.option('--payment', type=float, required=True, help='Payment per period')
def number_of_payments_command(principal, interest_rate, payment):
    """Calculates the (fractional) number of payments needed to pay off a loan."""
    _check(validate_simulation_inputs(principal, interest_rate, payment))
    try:
        periods = calc_number_of_payments(principal, interest_rate, payment)
    except AmortizationError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Number of payments: {periods:.6f}")
    click.echo(fmt_periods(periods))

@cli.command('solve-principal')
@click.option('--interest-rate', type=float, required=True, help='Interest rate per period (0.01 = 1%)')
@click.option('--payment', type=float, required=True, help='Payment per period')
@click.option('--num-periods', type=float, required=True, help='Target number of periods')
def solve_principal_command(interest_rate, payment, num_periods):
    """Solves for the principal paid off in exactly NUM_PERIODS payments."""
    _check(validate_solver_inputs(interest_rate, payment, num_periods))
    try:
        principal = solve_for_principal(interest_rate, payment, num_periods)
    except AmortizationError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Principal: {principal:.2f}")

@cli.command('solve-rate')
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--payment', type=float, required=True, help='Payment per period')
@click.option('--num-periods', type=float, required=True, help='Target number of periods')
def solve_rate_command(principal, payment, num_periods):
    """Solves for the interest rate per period that pays off PRINCIPAL in NUM_PERIODS payments."""
    _check(validate_rate_solver_inputs(principal, payment, num_periods))
    try:
        rate = solve_for_rate(principal, payment, num_periods)
    except AmortizationError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Interest rate: {rate:.8f} ({fmt_rate(rate)})")

@cli.command('schedule')
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--interest-rate', type=float, required=True, help='Interest rate per period (0.01 = 1%)')
@click.option('--payment', type=float, required=True, help='Payment per period')
@click.option('--start-date', type=click.DateTime(formats=['%Y-%m-%d']), help='Start date (YYYY-MM-DD), one period per month')
@click.option('--repayment-day', type=click.IntRange(1, 28), default=1, help='Repayment day')
@click.option('--summary', is_flag=True, help='Print totals instead of the full schedule')
def schedule_command(principal, interest_rate, payment, start_date, repayment_day, summary):
    """Generates the amortization schedule and outputs it as CSV."""
    _check(validate_simulation_inputs(principal, interest_rate, payment))
    try:
        schedule = generate_amortization_schedule(
            principal, interest_rate, payment,
            start_date.date() if start_date else None, repayment_day,
        )
    except AmortizationError as exc:
        raise click.ClickException(str(exc))
    if summary:
        stats = summarize_schedule(schedule)
        click.echo(f"Total payment: {fmt_amount(stats['total_payment'])}")
        click.echo(f"Total interest: {fmt_amount(stats['total_interest'])}")
        click.echo(f"Number of payments: {stats['number_of_payments']:.6f}")
        return
    click.echo(schedule.round(2).to_csv(index=False))

@cli.command('sensitivity')
@click.option('--interest-rate', type=float, required=True, help='Interest rate per period (0.01 = 1%)')
@click.option('--payment', type=float, required=True, help='Payment per period')
@click.option('--points', type=click.IntRange(2, 1000), default=20, help='Number of principals to evaluate')
def sensitivity_command(interest_rate, payment, points):
    """Lists the number of payments across a range of principals."""
    _check(validate_solver_inputs(interest_rate, payment, 1))
    table = principal_sensitivity(interest_rate, payment, principal_grid(interest_rate, payment, points))
    click.echo(table.to_string(index=False))

@cli.command('compare-annuity')
@click.option('--interest-rate', type=float, required=True, help='Interest rate per period (0.01 = 1%)')
@click.option('--payment', type=float, required=True, help='Payment per period')
@click.option('--num-periods', type=float, required=True, help='Target number of periods')
def compare_annuity_command(interest_rate, payment, num_periods):
    """Compares the bisection principal with the closed-form annuity present value."""
    _check(validate_solver_inputs(interest_rate, payment, num_periods))
    try:
        result = compare_with_annuity(interest_rate, payment, num_periods)
    except AmortizationError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Bisection principal: {result['bisection_principal']:.6f}")
    click.echo(f"Annuity principal: {result['annuity_principal']:.6f}")
    click.echo(f"Difference: {result['difference']:.6f}")

if __name__ == "__main__":
    cli()

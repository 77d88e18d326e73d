"""Demo: default indices, a handful of typical instruments, equivalent rates and break-even."""

from projection.comparison import equivalent_rates, find_break_even_day
from projection.indices import DEFAULT_INDICES
from projection.instruments import Instrument, RateKind, RateSpec
from projection.series import generate_series


def main() -> None:
    indices = DEFAULT_INDICES

    cdb = Instrument(RateSpec(RateKind.PERCENT_OF_INDEX, 110), is_taxable=True, name="CDB 110% CDI")
    lca = Instrument(RateSpec(RateKind.PERCENT_OF_INDEX, 100), is_taxable=False, name="LCA 100% CDI")
    pre = Instrument(RateSpec(RateKind.FIXED, 12), is_taxable=True, name="Tesouro Prefixado 12%")
    ipca = Instrument(RateSpec(RateKind.INFLATION_PLUS, 6), is_taxable=True, name="Tesouro IPCA+ 6%")
    selic = Instrument(RateSpec(RateKind.POLICY_PLUS, 0.1), is_taxable=True, name="Tesouro Selic + 0.1%")

    print("=== Projection Demo ===\n")
    print(
        f"Indices: CDI {indices.primary_floating_rate:.2%}, "
        f"IPCA {indices.inflation_rate:.2%}, SELIC {indices.policy_rate:.2%}\n"
    )
    for inv in (cdb, lca, pre, ipca, selic):
        s = equivalent_rates(inv, indices)
        print(inv.name)
        print(f"   annual (gross) = {s.gross_annual:.2%}")
        print(f"   1y gross       = {s.gross_365_days:.2%}")
        print(f"   1y net         = {s.net_365_days:.2%}")
        print(f"   2y net         = {s.net_720_days:.2%}\n")

    series = generate_series(cdb, indices, 730)
    print(f"{cdb.name}: net return around bracket changes")
    for day in (180, 181, 360, 361, 720, 721):
        print(f"   day {day:>3}: {series[day].net_return:.4%}")

    day = find_break_even_day(cdb, lca, indices)
    print(f"\nBreak-even {cdb.name} vs {lca.name}: {day if day is not None else 'none within 1080 days'}")
    print("Done.")


if __name__ == "__main__":
    main()

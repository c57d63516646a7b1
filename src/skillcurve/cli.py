"""
Command-line interface for skillcurve goodness-of-fit summaries.
"""
from __future__ import annotations
import argparse, json, os, sys, logging
import yaml
import pandas as pd

from skillcurve.data.synthetic_generator import generate_draws, draws_to_frame, frame_to_draws, save_csv
from skillcurve.evaluation.summary import SummaryConfig, summarize, format_summary
from skillcurve.exceptions import InsufficientClassesError, LengthMismatchError
from skillcurve.ml.model import SimpleFit, RandomEffectsFit
from skillcurve.validation import (
    validate_generate_params, validate_summary_config, validate_dataframe_columns
)
from skillcurve.visualization import plot_diagnostics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

def _ensure_dirs(path: str):
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)
        logger.debug(f"Created directory: {d}")

def load_config(path: str | None, args) -> SummaryConfig:
    """Build a SummaryConfig from an optional YAML file, then apply CLI flags."""
    values = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            values = yaml.safe_load(f) or {}
        if not isinstance(values, dict):
            raise ValueError(f"config file {path} must contain a mapping")
        unknown = set(values) - set(SummaryConfig.__dataclass_fields__)
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")
        # YAML 1.1 reads exponent floats without a dot (1e-9) as strings
        for key in ("epsilon", "histogram_binwidth"):
            if isinstance(values.get(key), str):
                try:
                    values[key] = float(values[key])
                except ValueError:
                    raise ValueError(f"{key} must be a number, got {values[key]!r}")
    cfg = SummaryConfig(**values)
    if args.no_plots:
        cfg.plots = False
    if args.epsilon is not None:
        cfg.epsilon = args.epsilon
    return cfg

def cmd_generate(args):
    logger.info(f"Generating draws: n={args.n}, draws={args.draws}, seed={args.seed}")
    try:
        validate_generate_params(args.n, args.draws, args.seed)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        sys.exit(1)

    draws, labels = generate_draws(args.n, n_draws=args.draws, separation=args.separation, seed=args.seed)
    try:
        _ensure_dirs(args.out)
        save_csv(draws_to_frame(draws, labels), args.out)
        logger.info(f"Generated draws written to {args.out} with {len(labels)} observations")
    except PermissionError:
        logger.error(f"Permission denied when writing to {args.out}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Failed to write file {args.out}: {e}")
        sys.exit(1)

def cmd_summarize(args):
    logger.info(f"Summarizing model output from {args.inp}")

    # Read input file
    try:
        df = pd.read_csv(args.inp)
        logger.info(f"Loaded {len(df)} observations")
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.inp}")
        sys.exit(1)
    except pd.errors.EmptyDataError:
        logger.error(f"Input file is empty: {args.inp}")
        sys.exit(1)
    except pd.errors.ParserError as e:
        logger.error(f"Failed to parse CSV file {args.inp}: {e}")
        sys.exit(1)

    # Validate data and configuration
    try:
        validate_dataframe_columns(df, {"observed"})
        draws, labels = frame_to_draws(df)
        cfg = load_config(args.config, args)
        validate_summary_config(cfg)
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        logger.error(f"Validation error: {e}")
        sys.exit(1)

    fit_cls = RandomEffectsFit if args.random_effects else SimpleFit
    model = fit_cls(draws, labels, call=f"skillcurve summarize --inp {args.inp}")

    try:
        report = summarize(model, plots=cfg.plots, cfg=cfg)
    except (InsufficientClassesError, LengthMismatchError) as e:
        logger.error(f"Cannot summarize: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid model output: {e}")
        sys.exit(1)

    print(format_summary(report, model))

    if args.plot_out and report.diagnostics is not None:
        try:
            plot_diagnostics(report.diagnostics, output_path=args.plot_out)
            logger.info(f"Diagnostic plots written to {args.plot_out}")
        except OSError as e:
            logger.error(f"Failed to write file {args.plot_out}: {e}")
            sys.exit(1)

    print(json.dumps(report.to_dict(), indent=2))

def main(argv=None):
    parser = argparse.ArgumentParser(description="Goodness-of-fit summary for binary probit models")
    sub = parser.add_subparsers()

    p1 = sub.add_parser("generate", help="Generate synthetic posterior draws and outcomes")
    p1.add_argument("--n", type=int, default=500)
    p1.add_argument("--draws", type=int, default=100)
    p1.add_argument("--separation", type=float, default=1.0)
    p1.add_argument("--seed", type=int, default=42)
    p1.add_argument("--out", type=str, default="data/draws.csv")
    p1.set_defaults(func=cmd_generate)

    p2 = sub.add_parser("summarize", help="Report AUC and TSS/SEDI-optimal thresholds")
    p2.add_argument("--inp", type=str, required=True)
    p2.add_argument("--config", type=str, default=None)
    p2.add_argument("--no-plots", action="store_true")
    p2.add_argument("--plot-out", type=str, default=None)
    p2.add_argument("--epsilon", type=float, default=None)
    p2.add_argument("--random-effects", action="store_true")
    p2.set_defaults(func=cmd_summarize)

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()

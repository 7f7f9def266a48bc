from pathlib import Path
from importlib import import_module

from alignment_checker import config


def load_checks(check_names, check_params=None, logger=None):
    """
    Dynamically load check classes based on names passed from CLI.
    """
    if check_params is None:
        check_params = {}

    checks = []
    check_mapping = {
        "vp_diff": ("vp_difference_check", "VpDifferenceCheck"),
        "too_short": ("too_short_check", "TooShortElementCheck"),
        "too_long": ("too_long_check", "TooLongElementCheck"),
    }

    for name in check_names:
        if name not in check_mapping:
            if logger:
                logger.log(f"Unknown check '{name}'. Available: {list(check_mapping.keys())}", level="ERROR")
            continue

        module_name, class_name = check_mapping[name]
        module = import_module(f"alignment_checker.checks.{module_name}")
        check_class = getattr(module, class_name)

        if name == "vp_diff":
            check = check_class(
                tolerance=check_params.get('vp_tolerance', config.DESIGN_LIMITS["vp_diff_tolerance"]),
                ceiling_vp=check_params.get('vp_ceiling', config.DESIGN_LIMITS["vp_ceiling"]),
                logger=logger,
                verbose=check_params.get('verbose', False)
            )
        else:
            check = check_class(logger=logger, verbose=check_params.get('verbose', False))

        checks.append(check)
        if logger:
            logger.log(f"Loaded check: {class_name}")

    return checks


def get_output_path(input_file: Path, suffix: str = ".csv"):
    """
    Create a default output path like 'yourfile_checked.csv'.
    """
    folder = input_file.parent
    name = input_file.stem
    return folder / f"{name}_checked{suffix}"

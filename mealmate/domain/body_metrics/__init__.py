"""Body metrics domain: BMI, BMR and ideal-weight calculations."""

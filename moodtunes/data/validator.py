"""
Catalog validation module for the MoodTunes system.
"""
import pandas as pd
from .schemas import ValidationResult, ENERGY_LABELS


class CatalogValidator:
    """Validates catalog schema, missing values, energy labels and identifiers."""

    REQUIRED_COLUMNS = {'id', 'title', 'mood', 'energy'}
    OPTIONAL_COLUMNS = {'genre', 'duration', 'description', 'audioUrl', 'audio_url'}
    CRITICAL_COLUMNS = ('id', 'title', 'mood', 'energy')

    def validate_schema(self, df: pd.DataFrame) -> ValidationResult:
        """Validate that every required column is present.

        Args:
            df: DataFrame of catalog records

        Returns:
            ValidationResult with schema validation results
        """
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        missing_columns = self.REQUIRED_COLUMNS - set(df.columns)
        for col in sorted(missing_columns):
            result.add_error(f"Missing required column: {col}")
        extra_columns = set(df.columns) - self.REQUIRED_COLUMNS - self.OPTIONAL_COLUMNS
        for col in sorted(extra_columns):
            result.add_warning(f"Unexpected column found: {col}")
        result.metadata = {
            'total_columns': len(df.columns),
            'total_rows': len(df),
            'missing_columns_count': len(missing_columns),
            'extra_columns_count': len(extra_columns)
        }
        return result

    def check_missing_values(self, df: pd.DataFrame) -> ValidationResult:
        """Check for missing or blank values in the critical columns.

        Args:
            df: DataFrame of catalog records

        Returns:
            ValidationResult with missing value analysis
        """
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        total_missing = 0
        for col in self.CRITICAL_COLUMNS:
            if col not in df.columns:
                continue
            blank = df[col].isna() | (df[col].astype(str).str.strip() == '')
            missing_count = int(blank.sum())
            total_missing += missing_count
            if missing_count > 0:
                rows = df.index[blank.to_numpy()].tolist()
                result.add_error(f"Critical column {col} has {missing_count} missing values (rows {rows})")
        if 'genre' in df.columns:
            missing_genre = int(df['genre'].isna().sum())
            if missing_genre > 0:
                result.add_warning(f"Column genre has {missing_genre} missing values")
        result.metadata = {'total_missing_values': total_missing}
        return result

    def validate_energy_labels(self, df: pd.DataFrame) -> ValidationResult:
        """Flag energy labels outside the ordinal set.

        Unknown labels score as medium, so they are reported as warnings.
        """
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        if 'energy' not in df.columns:
            return result
        labels = df['energy'].dropna().astype(str).str.strip().str.lower()
        unknown = labels[~labels.isin(ENERGY_LABELS) & (labels != '')]
        for label, count in unknown.value_counts().items():
            result.add_warning(
                f"Unknown energy label '{label}' on {count} tracks (treated as medium)"
            )
        result.metadata = {'unknown_energy_labels': int(len(unknown))}
        return result

    def check_duplicates(self, df: pd.DataFrame) -> ValidationResult:
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        if 'id' not in df.columns:
            return result
        duplicated = df['id'].dropna()
        duplicated = duplicated[duplicated.duplicated(keep='first')]
        for track_id in sorted(set(duplicated.astype(str))):
            result.add_error(f"Duplicate track id: {track_id}")
        result.metadata = {'duplicate_ids': int(len(duplicated))}
        return result

    def validate_all(self, df: pd.DataFrame) -> ValidationResult:
        """Run all validation checks on the catalog.

        Args:
            df: DataFrame to validate

        Returns:
            Combined ValidationResult from all checks
        """
        checks = {
            'schema_validation': self.validate_schema(df),
            'missing_values': self.check_missing_values(df),
            'energy_labels': self.validate_energy_labels(df),
            'duplicates': self.check_duplicates(df),
        }
        combined = ValidationResult(is_valid=True, errors=[], warnings=[], metadata={})
        for name, check in checks.items():
            for error in check.errors:
                combined.add_error(error)
            combined.warnings.extend(check.warnings)
            combined.metadata[name] = check.metadata
        return combined

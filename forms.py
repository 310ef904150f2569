# forms.py
from flask_wtf import FlaskForm
from wtforms import (
    SelectField, IntegerField, DateField, FileField, SubmitField
)
from wtforms.validators import DataRequired, NumberRange, Optional, ValidationError

from academic_age import list_tests
from standardisation import component_max, component_names


def assessment_choices():
    return [(name, name) for name in list_tests()]


class AcademicAgeForm(FlaskForm):
    test_name = SelectField("Assessment", validators=[DataRequired()])
    raw_score = IntegerField("Raw score", validators=[Optional(), NumberRange(min=0)])
    date_of_birth = DateField("Date of birth", validators=[DataRequired()])
    test_date = DateField("Test date", validators=[DataRequired()])
    submit = SubmitField("Calculate")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.test_name.choices = assessment_choices()

    def validate_test_date(self, field):
        if self.date_of_birth.data and field.data and field.data < self.date_of_birth.data:
            raise ValidationError("Test date cannot be before the date of birth.")


class StandardisedScoresForm(FlaskForm):
    submit = SubmitField("Standardise")

    @classmethod
    def build(cls, *args, **kwargs):
        """Form with one raw score field per ASB component."""

        class _Form(cls):
            pass

        for i, name in enumerate(component_names()):
            setattr(_Form, f"component_{i}", IntegerField(
                name,
                validators=[Optional(), NumberRange(min=0, max=component_max(name))],
            ))
        return _Form(*args, **kwargs)

    def component_fields(self):
        """(component name, field) pairs in profile order."""
        return [(name, self[f"component_{i}"]) for i, name in enumerate(component_names())]


# --- CSV imports ---

class CSVUploadAcademicAgesForm(FlaskForm):
    csv_file = FileField("Class CSV (.csv)", validators=[DataRequired()])
    test_name = SelectField("Assessment", validators=[DataRequired()])
    test_date = DateField("Test date", validators=[DataRequired()])

    submit_preview = SubmitField("Upload & Preview")
    submit_download = SubmitField("Download results CSV")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.test_name.choices = assessment_choices()

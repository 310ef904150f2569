# app.py
from flask import Flask, render_template, redirect, url_for, request, flash
from config import Config
from models import UnknownIdentifierError, Encoding
from forms import AcademicAgeForm, StandardisedScoresForm, CSVUploadAcademicAgesForm
from academic_age import (
    assess, format_age_difference, format_chronological_age, get_test_definition,
    list_tests, to_years_months,
)
from standardisation import (
    READINESS_COMPONENTS, profile_readiness, standardize,
    standardize_profile,
)
import io
import csv
import re
import logging
from datetime import datetime

from flask import jsonify, make_response


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # ---- Helpers
    CSV_COLUMNS = (
        "Name", "Date of birth", "Raw score", "Academic age", "Academic age (years/months)",
        "Chronological age", "Chronological age (years.months)", "Difference", "Deficit",
    )

    def deficit_css(status) -> str:
        """Map deficit status to a CSS class for colour-coding."""
        return app.config["DEFICIT_CSS"].get(getattr(status, "value", status), "")

    def result_row(result):
        """Display-ready dict for one AssessmentResult."""
        row = result.to_dict()
        row["chronological_age_display"] = to_years_months(result.chronological_age_months, Encoding.MONTHS)
        row["chronological_age_compact"] = format_chronological_age(result.chronological_age_months)
        row["age_difference_display"] = format_age_difference(result.age_difference)
        row["deficit_css"] = deficit_css(result.deficit_status)
        return row

    def parse_date(value):
        s = str(value or "").strip()
        if not s:
            return None
        for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y"):
            try:
                return datetime.strptime(s, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unrecognised date: {s!r}")

    @app.context_processor
    def inject_helpers():
        return {"deficit_css": deficit_css}

    @app.errorhandler(UnknownIdentifierError)
    def unknown_identifier(exc):
        app.logger.warning("Rejected request for %s: %s", request.path, exc)
        return jsonify({"ok": False, "error": str(exc)}), 400

    # ---- Pages

    @app.route("/")
    def index():
        return redirect(url_for("academic_age_page"))

    @app.route("/academic-age", methods=["GET", "POST"])
    def academic_age_page():
        form = AcademicAgeForm()
        result = None
        if form.validate_on_submit():
            result = result_row(assess(
                form.test_name.data,
                form.raw_score.data,
                form.date_of_birth.data,
                form.test_date.data,
            ))
        definition = get_test_definition(form.test_name.data) if form.test_name.data in list_tests() else None
        return render_template("academic_age.html", form=form, result=result, definition=definition)

    @app.route("/standardised", methods=["GET", "POST"])
    def standardised_page():
        form = StandardisedScoresForm.build()
        profile = None
        readiness = None
        if form.validate_on_submit():
            raw = {name: field.data for name, field in form.component_fields() if field.data is not None}
            profile = standardize_profile(raw)
            readiness = profile_readiness(profile)
        return render_template(
            "standardised.html",
            form=form,
            profile=profile,
            readiness=readiness,
            readiness_components=READINESS_COMPONENTS,
        )

    # ---- API: inline calculations for the class entry tables

    @app.route("/api/tests")
    def api_tests():
        family = (request.args.get("family") or "").strip().lower() or None
        names = list_tests(family)
        return jsonify({"ok": True, "tests": [get_test_definition(n).to_dict() for n in names]})

    @app.route("/api/academic-age/quick_calc", methods=["POST"])
    def api_academic_age_quick_calc():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"ok": False, "error": "expected a JSON object"}), 400

        test_name = str(data.get("test_name") or "").strip()
        if not test_name:
            return jsonify({"ok": False, "error": "test_name is required"}), 400
        raw_score = data.get("raw_score")

        try:
            dob = parse_date(data.get("date_of_birth"))
            test_date = parse_date(data.get("test_date"))
        except ValueError as exc:
            return jsonify({"ok": False, "error": str(exc)}), 400

        # unknown test names propagate to the UnknownIdentifierError handler
        result = assess(test_name, raw_score, dob, test_date)
        return jsonify({"ok": True, **result_row(result)})

    @app.route("/api/standardised/quick_calc", methods=["POST"])
    def api_standardised_quick_calc():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"ok": False, "error": "expected a JSON object"}), 400

        if "scores" in data:
            scores = data.get("scores")
            if not isinstance(scores, dict):
                return jsonify({"ok": False, "error": "scores must be an object"}), 400
            profile = standardize_profile(scores)
            return jsonify({"ok": True, "standard_scores": profile, "cognitive_readiness": profile_readiness(profile)})

        component = str(data.get("component") or "").strip()
        if not component:
            return jsonify({"ok": False, "error": "component is required"}), 400
        return jsonify({"ok": True, "component": component, "standard_score": standardize(component, data.get("raw_score"))})

    # ---- CSV import: class list in, computed academic ages out

    @app.route("/import/academic-ages", methods=["GET", "POST"])
    def import_academic_ages():
        form = CSVUploadAcademicAgesForm()
        preview_rows = []

        def normalize_header(header):
            s = re.sub(r"[\s\-]+", "_", str(header or "").strip().lower())
            return re.sub(r"[^a-z0-9_]", "", s)

        header_aliases = {
            "name": ["name", "pupil", "student", "child"],
            "date_of_birth": ["date_of_birth", "dob", "d_o_b", "birth_date", "birthday"],
            "raw_score": ["raw_score", "score", "raw", "mark"],
        }
        normalized_alias_map = {
            normalize_header(alias): canonical
            for canonical, aliases in header_aliases.items()
            for alias in aliases
        }

        if form.validate_on_submit():
            upload = request.files.get(form.csv_file.name)
            if not upload or not upload.filename.lower().endswith(".csv"):
                app.logger.info("Rejected academic age upload %r", getattr(upload, "filename", None))
                flash("Please upload a .csv file.", "error")
                return redirect(url_for("import_academic_ages"))

            test_name = form.test_name.data
            test_date = form.test_date.data

            raw = upload.read().decode("utf-8-sig", errors="replace")
            reader = csv.DictReader(io.StringIO(raw))
            field_map = {}
            for original in reader.fieldnames or []:
                canonical = normalized_alias_map.get(normalize_header(original))
                if canonical and canonical not in field_map:
                    field_map[canonical] = original

            missing = [c for c in header_aliases if c not in field_map]
            if missing:
                flash(f"CSV is missing column(s): {', '.join(missing)}.", "error")
                return render_template("import_academic_ages.html", form=form, preview_rows=[])

            max_rows = app.config["BULK_IMPORT_MAX_ROWS"]
            for i, r in enumerate(reader, start=1):
                if i > max_rows:
                    flash(f"Only the first {max_rows} rows were processed.", "warning")
                    break

                name = (r.get(field_map["name"]) or "").strip()
                raw_score = (r.get(field_map["raw_score"]) or "").strip()
                try:
                    dob = parse_date(r.get(field_map["date_of_birth"]))
                except ValueError:
                    dob = None

                if not name or not dob:
                    preview_rows.append({"row": i, "status": "error", "name": name, "raw_score": raw_score})
                    continue

                row = result_row(assess(test_name, raw_score, dob, test_date))
                row.update({"row": i, "status": "ok", "name": name, "date_of_birth": dob.isoformat()})
                preview_rows.append(row)

            ok_rows = [row for row in preview_rows if row["status"] == "ok"]
            app.logger.info(
                "Academic age import: %s rows, %s ok, test=%s", len(preview_rows), len(ok_rows), test_name
            )

            if form.submit_download.data:
                out = io.StringIO()
                writer = csv.writer(out)
                writer.writerow(CSV_COLUMNS)
                for row in ok_rows:
                    writer.writerow([
                        row["name"],
                        row["date_of_birth"],
                        row["raw_score"] if row["raw_score"] is not None else "",
                        row["academic_age"],
                        row["academic_age_display"],
                        row["chronological_age_months"],
                        row["chronological_age_display"],
                        row["age_difference"],
                        "Yes" if row["is_deficit"] else "No",
                    ])
                response = make_response(out.getvalue())
                response.headers["Content-Type"] = "text/csv; charset=utf-8"
                response.headers["Content-Disposition"] = "attachment; filename=academic_ages.csv"
                return response

        return render_template("import_academic_ages.html", form=form, preview_rows=preview_rows)

    # ---- Critical: return the Flask app object
    return app


if __name__ == "__main__":
    logging.basicConfig(level=Config.LOG_LEVEL)
    app = create_app()
    app.run(debug=True)

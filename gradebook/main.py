"""
Main entry point for the gradebook.
"""

import argparse
import logging
from typing import Optional

from .config import AppConfig, load_config
from .core.entities import Course, Evaluation, Referent, Student, YearGroup
from .core.exceptions import GradebookException
from .services import ApplicationContext, CreationService, ReportService


class GradebookApp:
    """Wires the session, creation and report services together."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self.context = ApplicationContext(self._config)
        self.creation = CreationService(self._config)
        self.reports = ReportService(self._config)

    def register(self, first_name: str, last_name: str, password: str,
                 email: str, phone: str, referent_id: Optional[str] = None) -> Referent:
        """Register a referent; the ID defaults to a suggested one."""
        referent = Referent()
        result = self.creation.apply_referent_fields(
            referent, referent_id or self.context.suggest_referent_id(),
            first_name, last_name, password, email, phone,
        )
        if not result:
            result.failure.raise_for_failure()
        return self.context.register(referent)

    def create_year_group(self, year: str, description: str) -> YearGroup:
        year_group = YearGroup()
        result = self.creation.apply_year_group_fields(year_group, year, description)
        if not result:
            result.failure.raise_for_failure()
        return self.creation.save_year_group(self.context.require_referent(), year_group)

    def create_course(self, abbreviation: str, description: str) -> Course:
        course = Course()
        result = self.creation.apply_course_fields(course, abbreviation, description)
        if not result:
            result.failure.raise_for_failure()
        return self.creation.save_course(self.context.require_referent(), course)

    def create_student(self, matriculation_number: str, first_name: str, last_name: str,
                       year_identifier: str) -> Student:
        owner = self.context.require_referent()
        student = Student()
        result = self.creation.apply_student_fields(
            student, owner, matriculation_number, first_name, last_name, year_identifier)
        if not result:
            result.failure.raise_for_failure()
        return self.creation.save_student(owner, student)

    def submit_evaluation(self, year_identifier: str, matriculation_number: str, abbreviation: str,
                          exam_description: str, exam_date: str, exam_grade: str) -> Evaluation:
        owner = self.context.require_referent()
        evaluation = Evaluation()
        result = self.creation.apply_evaluation_fields(
            evaluation, owner, self.context.referents, owner.id, year_identifier,
            matriculation_number, abbreviation, exam_description, exam_date, exam_grade,
        )
        if not result:
            result.failure.raise_for_failure()
        return self.creation.save_evaluation(owner, evaluation)

    def create_sample_data(self) -> Referent:
        """Create a referent with a small class and a few exams."""
        print("Creating sample data...")
        referent = self.register("Ann", "Lee", "pass", "ann.lee@school.at", "066412345", "12345")
        self.create_year_group("2023", "4AHIF")
        self.create_year_group("2023", "4BHIF")
        self.create_course("MAT", "Mathematics")
        self.create_course("ENG", "English")
        self.create_student("1234567890", "Max", "Mustermann", "4AHIF")
        self.create_student("1234567891", "Erika", "Musterfrau", "4AHIF")
        self.create_student("1234567892", "John", "Doe", "4BHIF")

        self.submit_evaluation("4AHIF", "1234567890", "MAT", "Algebra test", "10.01.2024", "2")
        self.submit_evaluation("4AHIF", "1234567890", "MAT", "Geometry test", "15.03.2024", "1")
        self.submit_evaluation("4AHIF", "1234567891", "MAT", "Algebra test", "10.01.2024", "3")
        self.submit_evaluation("4AHIF", "1234567890", "ENG", "Essay", "20.12.2023", "4")
        self.submit_evaluation("4BHIF", "1234567892", "ENG", "Essay", "01.01.2023", "5")
        print("✓ Sample data created")
        return referent

    def run_demo(self) -> None:
        """Run a scripted session and print the three reports."""
        print("Running gradebook demonstration...")
        referent = self.create_sample_data()
        self.context.toggle_analysis()
        print(f"✓ Logged in as {referent.full_name} ({referent.id}), menu: {self.context.menu_state.value}")

        analysis = self.reports.analysis_report_for(referent, "4AHIF", "MAT")
        print(f"\n=== Analysis {analysis.course.abbreviation} / {analysis.year_group.identifier} ===")
        print(f"Avg. grade: {analysis.rough_average}")
        for row in analysis.rows:
            for line in row.evaluations:
                print(f"{line.matriculation_number}  {line.student_name:<22} "
                      f"{line.exam_description:<22} {line.exam_date}  {line.exam_grade}")
            print(f"{'Avg. grade:':>76} {row.average_grade:4}")

        certificate = self.reports.certificate_report_for(referent, "4AHIF", "1234567890")
        print(f"\n=== Certificate {certificate.student.full_name} ===")
        for row in certificate.rows:
            print(f"{row.abbreviation:<10}{row.description:<22} {row.average_grade:4}")

        first, last = self.reports.default_period(referent)
        period = self.reports.period_report(referent, first, last)
        print(f"\n=== Evaluations {first} - {last} ===")
        for line in period.rows:
            print(f"{line.exam_date:<14}{line.exam_description:<22}{line.matriculation_number}    "
                  f"{line.student_name:<23}  {line.exam_grade}")

        print("\n=== Statistics ===")
        print(f"Creation: {self.creation.get_statistics()}")
        self.context.logoff()
        print("\n✓ Demo completed")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Gradebook for referents")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except GradebookException as e:
        parser.error(e.message)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app = GradebookApp(config)
    try:
        app.run_demo()
    except GradebookException as e:
        print(f"\nDemo failed with error: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from django.db import migrations, models
import django.db.models.deletion


CATEGORY_CHOICES = [
    ("easy", "쉬운문제"),
    ("listening", "듣기"),
    ("listening_full", "듣기(27)"),
    ("mock_exam", "모의고사"),
    ("vocab", "영단어"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AnswerKey",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "category",
                    models.CharField(choices=CATEGORY_CHOICES, db_index=True, max_length=20),
                ),
                ("target_id", models.CharField(blank=True, default="", max_length=64)),
                ("title", models.CharField(blank=True, default="", max_length=200)),
                ("answers", models.JSONField(default=list)),
                ("weighted_indices", models.JSONField(blank=True, null=True)),
            ],
            options={
                "db_table": "assessments_answer_key",
                "ordering": ["category", "target_id"],
            },
        ),
        migrations.CreateModel(
            name="HomeworkAssignmentDay",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("student_id", models.PositiveIntegerField(db_index=True)),
                ("category", models.CharField(choices=CATEGORY_CHOICES, max_length=20)),
                ("homework_date", models.DateField()),
            ],
            options={
                "db_table": "assessments_homework_assignment_day",
                "ordering": ["-homework_date", "category"],
            },
        ),
        migrations.CreateModel(
            name="SubmissionAttempt",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("student_id", models.PositiveIntegerField(db_index=True)),
                ("category", models.CharField(choices=CATEGORY_CHOICES, max_length=20)),
                ("target_id", models.CharField(blank=True, default="", max_length=64)),
                ("target_key", models.CharField(blank=True, default="", max_length=64)),
                ("logical_date", models.DateField()),
                ("submitted_at", models.DateTimeField()),
                ("answers", models.JSONField(blank=True, default=list)),
                ("score", models.IntegerField(blank=True, null=True)),
                ("max_score", models.IntegerField(blank=True, null=True)),
                ("correct_count", models.IntegerField(blank=True, null=True)),
                ("question_count", models.IntegerField(blank=True, null=True)),
                ("details", models.JSONField(blank=True, default=list)),
                (
                    "answer_key",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="attempts",
                        to="assessments.answerkey",
                    ),
                ),
            ],
            options={
                "db_table": "assessments_submission_attempt",
                "ordering": ["-logical_date", "-submitted_at", "-id"],
            },
        ),
        migrations.AddConstraint(
            model_name="answerkey",
            constraint=models.UniqueConstraint(
                fields=("category", "target_id"),
                name="uniq_assessment_answer_key_category_target",
            ),
        ),
        migrations.AddConstraint(
            model_name="homeworkassignmentday",
            constraint=models.UniqueConstraint(
                fields=("student_id", "category", "homework_date"),
                name="uniq_assessment_assignment_student_category_date",
            ),
        ),
        migrations.AddConstraint(
            model_name="submissionattempt",
            constraint=models.UniqueConstraint(
                fields=("student_id", "category", "target_key", "logical_date"),
                name="uniq_assessment_attempt_student_category_target_day",
            ),
        ),
        migrations.AddIndex(
            model_name="submissionattempt",
            index=models.Index(
                fields=["student_id", "category", "logical_date"],
                name="assess_attempt_student_day_idx",
            ),
        ),
    ]

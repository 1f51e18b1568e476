from services.merit import calculate_percentage


def compute_dashboard_stats(students, subjects, marks):
    subjects_by_id = {s.id: s for s in subjects}

    percentages = []
    for mark in marks:
        subject = subjects_by_id.get(mark.subject_id)
        if subject is None or subject.max_marks <= 0:
            continue
        percentages.append(calculate_percentage(mark.marks, subject.max_marks))

    average = sum(percentages) / len(percentages) if percentages else 0

    return {
        "total_students": len(students),
        "total_subjects": len(subjects),
        "completed_assessments": len({mark.student_id for mark in marks}),
        "average_percentage": round(average, 2),
    }

#!/usr/bin/env python3
"""
Demo scenario for the academic records model.
"""

import sys
import os
import json
from datetime import date

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from academia.core import AcademicStatus, Course, Group, University, UniversityError


def run_demo():
    """Walk through a small university and print what happens."""
    print("=" * 60)
    print("ACADEMIA - UNIVERSITY RECORDS DEMO")
    print("=" * 60)
    
    config = {
        'first_person_id': 1,
        'default_contact': {'email': 'office@kpi.ua', 'phone': '+380442049100'},
    }
    university = University("Kyiv Polytechnic", config)
    
    print("\n1. Creating sample data...")
    groups = create_sample_data(university)
    
    print("\n2. Demonstrating enrollment...")
    demonstrate_enrollment(university, groups)
    
    print("\n3. Demonstrating queries...")
    demonstrate_queries(university)
    
    print("\n4. University snapshot...")
    print(json.dumps(university.to_dict(), indent=2))
    
    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def create_sample_data(university):
    """Register courses, teachers, students and groups."""
    print("  Creating courses...")
    courses = [
        Course("Calculus I", 4, "Mathematics"),
        Course("Linear Algebra", 3, "Mathematics"),
        Course("Programming Basics", 5, "Computer Science"),
    ]
    for course in courses:
        university.add_course(course)
    
    print("  Creating teachers...")
    kovalenko = university.create_teacher(
        {'first_name': 'Iryna', 'last_name': 'Kovalenko', 'birth_day': date(1978, 3, 12), 'gender': 'female'},
        ['analysis', 'algebra'],
    )
    melnyk = university.create_teacher(
        {'first_name': 'Petro', 'last_name': 'Melnyk', 'birth_day': date(1985, 11, 2), 'gender': 'male'},
        ['programming'],
    )
    kovalenko.assign_course(courses[0])
    kovalenko.assign_course(courses[1])
    melnyk.assign_course(courses[2])
    
    print("  Creating students...")
    students = [
        university.create_student({'first_name': first, 'last_name': last, 'birth_day': born, 'gender': gender})
        for first, last, born, gender in [
            ('Olena', 'Shevchenko', date(2004, 2, 29), 'female'),
            ('Andrii', 'Bondarenko', date(2003, 7, 21), 'male'),
            ('Sofiia', 'Tkachenko', date(2005, 1, 9), 'female'),
        ]
    ]
    for student, gpa in zip(students, [3.9, 3.1, 3.6]):
        student.update_gpa(gpa)
    
    print("  Creating groups...")
    groups = [
        Group("MA-11", courses[0], kovalenko),
        Group("MA-12", courses[1], kovalenko),
        Group("CS-11", courses[2], melnyk),
    ]
    for group in groups:
        university.add_group(group)
    
    print("  ✓ Sample data created successfully")
    return groups


def demonstrate_enrollment(university, groups):
    students = university.get_all_people_by_role("student")
    
    for group in groups:
        for student in students:
            student.enroll_course(group.course)
            group.add_student(student)
        print(f"  ✓ {len(group.get_students())} students joined {group.name}")
    
    try:
        groups[0].add_student(students[0])
    except UniversityError as e:
        print(f"  ✗ {students[0].full_name}: {e}")
    
    leaving = students[1]
    leaving.update_academic_status(AcademicStatus.ACADEMIC_LEAVE)
    groups[2].remove_student_by_id(leaving.id)
    try:
        leaving.enroll_course(groups[0].course)
    except UniversityError as e:
        print(f"  ✗ {leaving.full_name}: {e}")
    
    for student in students:
        print(f"  {student.full_name}: {student.total_credits} credits, "
              f"status {student.status.value}, age {student.age}")


def demonstrate_queries(university):
    for teacher in university.get_all_people_by_role("teacher"):
        print(f"  Teacher {teacher.full_name}: {[course.name for course in teacher.get_courses()]}")
    
    for course in university.courses:
        group = university.find_group_by_course(course)
        print(f"  {course.name} -> {group.name if group else 'no group'}")
    
    try:
        university.get_all_people_by_role("admin")
    except ValueError as e:
        print(f"  ✗ {e}")


if __name__ == "__main__":
    run_demo()

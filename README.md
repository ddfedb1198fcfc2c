# unisecretary

An interactive secretary for a small university. It keeps students,
professors and courses in three comma-separated text files, spreads them
over eight academic semesters, and lets you assign professors to courses,
enroll students, record grades, and check who can graduate.

## Installing

```
pip install .
```

## Running

Start it from a directory that holds the data files:

```
unisecretary
```

or point it at another directory:

```
unisecretary --directory path/to/data
```

It reads these files from that directory:

| File             | One line per record                                 |
|------------------|-----------------------------------------------------|
| `students.txt`   | `name,surname,age,semester,id`                      |
| `courses.txt`    | `name,semester,ects,mandatory` (`True` or `False`)  |
| `professors.txt` | `name,surname,age,id`                               |

Example `courses.txt`:

```
Algorithms,3,6,True
Databases,5,5,False
```

Blank lines are skipped. Courses and students of a semester outside 1 to 8
are left out. The mandatory flag must be `True`, `true`, `False` or
`false`. If a file is missing or a line cannot be read, the command prints
the error and exits with status 1.

After loading, a menu offers:

1. add, modify or delete a professor
2. add, modify or delete a student
3. add, modify or delete a course
4. assign a professor to a course
5. enroll a student in courses of their semester or earlier ones
6. let a professor enter grades for one of their courses, by hand or at random
7. write `passed_students.txt` with the students of a semester who passed one course
8. print a professor's statistics per semester and course
9. print a student's detailed grades
10. list which students are eligible for graduation

Any other choice ends the program. Adding, modifying and deleting rewrite
the matching file; modifying asks for a field letter and the new value.

## Rules it applies

- A grade is from 0 to 10 and is kept as a whole number. A course is
  passed with 5 or more. If a student is graded twice in the same course,
  the grade becomes the average of the two.
- A student can only be graded in a course of their current semester or
  an earlier one.
- To graduate a student must be in at least the eighth semester, hold
  some grade, and have passed at least 32 courses worth at least 240 ECTS
  in total.
- In the statistics, the average grade is the sum of the passing
  students' grades divided by all students of the semester.

## What it does not do

Only the three data files are stored. Professor-to-course assignments,
enrollments and grades live in memory and are lost when the program ends;
the only record of grades written to disk is `passed_students.txt`.

## Using it from Python

The building blocks can be used on their own:

```python
from unisecretary.actions import assign_course, professor_statistics
from unisecretary.coursefile import read_courses
from unisecretary.professor import ProfessorRegistry
from unisecretary.professorfile import read_professors
from unisecretary.semester import graduate, make_semesters
from unisecretary.studentfile import read_students

semesters = make_semesters()
read_courses("courses.txt", semesters)
students = read_students("students.txt", semesters)
registry = ProfessorRegistry()
read_professors("professors.txt", registry)

professor = registry[0]
assign_course(professor, "Algorithms", semesters)
for stats in professor_statistics(professor, semesters):
    print(stats.semester, stats.course, stats.passed_students, stats.average_grade)

print([graduate(semesters, s) for s in students])
```

Other pieces: `append_course`, `delete_course` and `modify_course` in
`unisecretary.coursefile` (and their counterparts in `studentfile` and
`professorfile`) change the files; `grade_course` and `graduation_report`
in `unisecretary.actions` grade a course and list graduation eligibility;
`detailed_grades` in `unisecretary.semester` builds a student's grade
report; `Secretary` in `unisecretary.secretary` is an in-memory register of
people.

## Tests

```
pip install .[test]
pytest
```
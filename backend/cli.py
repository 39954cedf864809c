import argparse
import getpass
import logging
import sys
from pathlib import Path

from application.use_cases import (
    ExportRoutinesUseCase,
    LoadRoutinesUseCase,
    WorkoutSession,
)
from backend.auth import AuthError, AuthService
from backend.database import get_supabase_client
from backend.services import (
    ExerciseSuggestionService,
    WeightUnitService,
    reset_local_data,
)
from backend.settings import get_settings
from domain.models import ExerciseType, WeightUnit
from domain.services import format_weight, to_display_weight, to_storage_weight
from infrastructure.db import SupabaseExerciseRepository, SupabaseRoutineRepository
from infrastructure.storage import JsonFileKeyValueStore


def _fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _store(settings):
    return JsonFileKeyValueStore(settings.local_storage_path)


def _load_routines(args, settings):
    client = get_supabase_client(settings)
    if client is None:
        _fail("Supabase is not configured (set SUPABASE_URL and SUPABASE_ANON_KEY)")

    password = args.password or getpass.getpass("Password: ")
    try:
        user_id = AuthService(client).sign_in(args.email, password)
    except AuthError as e:
        _fail(e.message)

    result = LoadRoutinesUseCase(
        routine_repo=SupabaseRoutineRepository(client),
        exercise_repo=SupabaseExerciseRepository(client),
    ).execute(user_id)
    if not result.success:
        _fail(result.error)
    return result


def cmd_units(args, settings):
    units = WeightUnitService(_store(settings))
    units.load()
    if args.unit:
        if not units.change(args.unit):
            _fail("Failed to save weight unit preference")
    print(units.unit.value)


def cmd_convert(args, settings):
    from_unit = WeightUnit.parse(args.from_unit)
    if from_unit is None:
        _fail(f"Unknown unit: {args.from_unit}")

    if args.to_unit:
        to_unit = WeightUnit.parse(args.to_unit)
        if to_unit is None:
            _fail(f"Unknown unit: {args.to_unit}")
    else:
        units = WeightUnitService(_store(settings))
        to_unit = units.load()

    kg = to_storage_weight(args.weight, from_unit)
    print(format_weight(to_display_weight(kg, to_unit), to_unit) or f"0 {to_unit.value}")


def cmd_routines(args, settings):
    result = _load_routines(args, settings)

    if args.action == "export":
        export = ExportRoutinesUseCase().execute(result.routines)
        output = Path(args.output_dir) / export.filename
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(export.content, encoding="utf-8")
        print(f"Exported {export.routine_count} routine(s) to {output}")
        return

    units = WeightUnitService(_store(settings))
    unit = units.load()
    session = WorkoutSession(result.routines, result.active_routine_id)

    if not result.routines:
        print("No routines yet.")
        return
    for routine in result.routines:
        print(routine)
        for exercise in routine.exercises:
            if exercise.type == ExerciseType.STRENGTH:
                weight = format_weight(to_display_weight(exercise.weight, unit), unit)
                detail = f"{exercise.sets or '-'} x {exercise.reps or '-'}"
                if weight:
                    detail += f" @ {weight}"
            else:
                detail = f"{exercise.duration or '-'} min"
            day = exercise.day.value if exercise.day else "-"
            print(f"  {day:<9} {exercise.name}: {detail}")

    if session.active_routine is not None:
        today = session.today_name()
        if session.is_rest_day():
            print(f"Today ({today.value}) is a rest day.")
        else:
            names = ", ".join(ex.name for ex in session.todays_exercises())
            print(f"Today ({today.value}): {names}")


def cmd_suggest(args, settings):
    suggestions = ExerciseSuggestionService(_store(settings))
    matches = suggestions.search(args.query)
    if not matches:
        print("No matching exercises.")
        return
    for exercise in matches:
        print(exercise.name)


def cmd_reset_local(args, settings):
    if not reset_local_data(_store(settings)):
        _fail("There was an error resetting your data")
    print("All local data has been reset")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="workout-tracker",
        description="Manage weekly workout routines",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    units = sub.add_parser("units", help="Show or set the preferred weight unit")
    units.add_argument("unit", nargs="?", choices=[u.value for u in WeightUnit])
    units.set_defaults(func=cmd_units)

    convert = sub.add_parser("convert", help="Convert a weight between kg and lbs")
    convert.add_argument("weight", help="Weight as entered, e.g. 100 or 12.5")
    convert.add_argument("--from", dest="from_unit", default=WeightUnit.KG.value)
    convert.add_argument("--to", dest="to_unit", help="Target unit (default: preferred unit)")
    convert.set_defaults(func=cmd_convert)

    routines = sub.add_parser("routines", help="List or export your routines")
    routines.add_argument("action", choices=["list", "export"])
    routines.add_argument("--email", required=True)
    routines.add_argument("--password", help="Prompted for when omitted")
    routines.add_argument("-o", "--output-dir", default=".", help="Export directory")
    routines.set_defaults(func=cmd_routines)

    suggest = sub.add_parser("suggest", help="Search previously used exercises")
    suggest.add_argument("query")
    suggest.set_defaults(func=cmd_suggest)

    reset = sub.add_parser("reset-local", help="Clear locally cached data")
    reset.set_defaults(func=cmd_reset_local)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args, settings)
    except OSError as e:
        _fail(e)


if __name__ == "__main__":
    main()

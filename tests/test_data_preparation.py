"""Test suite for collection preparation.

Tests verify that raw document collections are renamed to display columns,
cleaned and de-duplicated, and that specialties and reviews are normalised.
"""
import numpy as np
import pandas as pd

from src.data.preparation import (
    PROVIDER_COLUMNS,
    prepare_provider_records,
    prepare_provider_records_with_summary,
    prepare_reviews,
    prepare_specialties,
)


def _raw_doctors():
    return pd.DataFrame(
        [
            {
                "id": "doc-1",
                "name": " Alice Smith ",
                "specialty": "Cardiology",
                "city": "Gaborone",
                "latitude": -24.6,
                "longitude": 25.9,
                "rating": 4.5,
                "phone": "3951234567",
                "languages": "English",
            },
            {
                "id": "doc-2",
                "name": "Bob Jones",
                "specialty": "Dermatology",
                "city": "Francistown",
                "latitude": "-21.2",
                "longitude": "27.5",
                "rating": None,
            },
            {"id": "doc-1", "name": "Alice Duplicate", "specialty": "Cardiology"},
            {"id": None, "name": "No Id"},
            {"id": "doc-3", "name": "", "city": "", "latitude": 200.0, "longitude": 25.0, "rating": "n/a"},
        ]
    )


class TestPrepareProviderRecords:
    def test_renames_to_display_columns_in_order(self):
        result = prepare_provider_records(_raw_doctors())

        assert list(result.columns[: len(PROVIDER_COLUMNS)]) == PROVIDER_COLUMNS
        assert list(result.columns[len(PROVIDER_COLUMNS) :]) == ["languages"]

    def test_first_id_wins_and_missing_ids_are_dropped(self):
        result = prepare_provider_records(_raw_doctors())

        assert list(result["ID"]) == ["doc-1", "doc-2", "doc-3"]
        assert result.loc[0, "Name"] == "Alice Smith"

    def test_text_is_cleaned(self):
        result = prepare_provider_records(_raw_doctors())

        assert result.loc[2, "Name"] is None
        assert result.loc[2, "City"] is None

    def test_rating_defaults_to_zero(self):
        result = prepare_provider_records(_raw_doctors())

        assert list(result["Rating"]) == [4.5, 0.0, 0.0]

    def test_coordinates_are_numeric_and_invalid_pairs_blanked(self):
        result = prepare_provider_records(_raw_doctors())

        assert result.loc[1, "Latitude"] == -21.2
        assert np.isnan(result.loc[2, "Latitude"])
        assert np.isnan(result.loc[2, "Longitude"])

    def test_missing_optional_fields_are_added(self):
        result = prepare_provider_records(pd.DataFrame([{"id": "x", "name": "Only Name"}]))

        assert result.loc[0, "Photo URL"] is None
        assert result.loc[0, "Rating"] == 0.0
        assert np.isnan(result.loc[0, "Latitude"])

    def test_display_columns_are_accepted(self, two_city_corpus):
        result = prepare_provider_records(two_city_corpus)

        assert list(result["Name"]) == ["Alice Smith", "Bob Jones"]

    def test_empty_input(self):
        result = prepare_provider_records(pd.DataFrame())

        assert result.empty
        assert list(result.columns) == PROVIDER_COLUMNS

    def test_summary_counts(self, caplog):
        with caplog.at_level("WARNING"):
            _, summary = prepare_provider_records_with_summary(_raw_doctors())

        assert summary.total_records == 5
        assert summary.kept_records == 3
        assert summary.duplicate_ids == 1
        assert summary.missing_ids == 1
        assert summary.missing_coordinates == 1
        assert summary.missing_names == 1
        assert len(summary.warnings) == 2
        assert "repeated id" in caplog.text


class TestPrepareSpecialties:
    def test_keeps_named_specialties(self):
        raw = pd.DataFrame([{"id": "s1", "name": " Cardiology "}, {"id": "s2", "name": ""}, {"id": "s3"}])

        result = prepare_specialties(raw)

        assert list(result.columns) == ["ID", "Name"]
        assert list(result["Name"]) == ["Cardiology"]

    def test_empty_input(self):
        assert list(prepare_specialties(None).columns) == ["ID", "Name"]


class TestPrepareReviews:
    def test_normalises_reviews(self):
        raw = pd.DataFrame(
            [
                {"id": "r1", "doctorId": "doc-1", "userName": "Kabo", "rating": "5", "createdAt": "2024-03-01T10:00:00Z"},
                {"id": "r2", "doctorId": None, "userName": "Orphan", "rating": 3},
                {"id": "r3", "doctorId": "doc-2", "rating": 4, "createdAt": "not a date"},
            ]
        )

        result = prepare_reviews(raw)

        assert list(result["ID"]) == ["r1", "r3"]
        assert list(result["Rating"]) == [5, 4]
        assert result.loc[0, "Created At"] == pd.Timestamp("2024-03-01T10:00:00Z")
        assert pd.isna(result.loc[1, "Created At"])
        assert result.loc[1, "Text"] is None

    def test_empty_input(self):
        result = prepare_reviews(pd.DataFrame())

        assert result.empty
        assert "Doctor ID" in result.columns


class TestLabelsAndMissingValues:
    def test_placeholder_words_survive_and_match_facets(self):
        from src.utils.facets import FilterState, build_facet_index, facet_mask

        raw = pd.DataFrame([{"id": "1", "name": "Dr A", "city": "Nan", "specialty": "None"}])

        result = prepare_provider_records(raw)

        assert result.loc[0, "City"] == "Nan"
        assert result.loc[0, "Specialty"] == "None"
        assert build_facet_index(result, "City") == ["Nan"]
        assert facet_mask(result, FilterState(city="Nan", specialty="None")).all()

    def test_missing_text_fields_are_none_in_object_columns(self):
        raw = pd.DataFrame([{"id": "1", "name": "Dr A", "email": None}, {"id": "2", "email": "b@example.org"}])

        result = prepare_provider_records(raw)

        for col in ("Name", "Email", "Photo URL", "About"):
            assert result[col].dtype == object
        assert result.loc[1, "Name"] is None
        assert result.loc[0, "Email"] is None
        assert result.loc[0, "Photo URL"] is None

"""Tests for QueryService lookups and filters."""

from __future__ import annotations

from pokedex_api.app.core.store import CatalogStore
from pokedex_api.app.schemas.attack import Attack
from pokedex_api.app.services import MutationService, QueryService


class TestListing:
    def test_list_pokemon_is_live(self, store: CatalogStore, queries: QueryService) -> None:
        assert queries.list_pokemon() is store.pokemon

    def test_list_types(self, queries: QueryService) -> None:
        assert queries.list_types() == ["Grass", "Poison", "Fire", "Water", "Electric"]

    def test_list_attacks_returns_raw_mapping(self, store: CatalogStore, queries: QueryService) -> None:
        attacks = queries.list_attacks()
        assert attacks is store.attacks
        assert set(attacks) == {"fast", "special"}


class TestGetPokemon:
    def test_by_name(self, queries: QueryService) -> None:
        assert queries.get_pokemon(name="Charmander").id == "4"

    def test_by_id(self, queries: QueryService) -> None:
        assert queries.get_pokemon(id="25").name == "Pikachu"

    def test_either_criterion_matches_first_in_order(self, queries: QueryService) -> None:
        # id "1" is Bulbasaur, name "Charmander" is the second record
        assert queries.get_pokemon(id="1", name="Charmander").name == "Bulbasaur"
        assert queries.get_pokemon(id="4", name="Pikachu").name == "Charmander"

    def test_mismatched_id_still_matches_on_name(self, queries: QueryService) -> None:
        assert queries.get_pokemon(id="999", name="Squirtle").name == "Squirtle"

    def test_not_found_returns_none(self, queries: QueryService) -> None:
        assert queries.get_pokemon(id="999", name="Mew") is None

    def test_no_arguments_matches_nothing(self, queries: QueryService) -> None:
        assert queries.get_pokemon() is None

    def test_no_arguments_matches_record_without_name(
        self, queries: QueryService, mutations: MutationService
    ) -> None:
        mutations.add_pokemon(id="0")
        assert queries.get_pokemon().id == "0"

    def test_duplicates_return_first(self, queries: QueryService, mutations: MutationService) -> None:
        mutations.add_pokemon(id="999", name="Pikachu", classification="Clone")
        assert queries.get_pokemon(name="Pikachu").id == "25"


class TestGetAttacks:
    def test_bucket_names(self, store: CatalogStore, queries: QueryService) -> None:
        assert queries.get_attacks("fast") is store.attacks["fast"]
        assert queries.get_attacks("special") is store.attacks["special"]

    def test_attack_type_is_not_a_key(self, queries: QueryService) -> None:
        assert queries.get_attacks("Fire") is None
        assert queries.get_attacks(None) is None


class TestFindByType:
    def test_matches_any_listed_type(self, queries: QueryService) -> None:
        assert [p.name for p in queries.find_by_type("Poison")] == ["Bulbasaur"]
        assert [p.name for p in queries.find_by_type("Fire")] == ["Charmander"]

    def test_one_entry_per_pokemon(self, store: CatalogStore, queries: QueryService) -> None:
        store.pokemon[1].types = ["Fire", "Fire"]
        assert [p.name for p in queries.find_by_type("Fire")] == ["Charmander"]

    def test_no_match(self, queries: QueryService) -> None:
        assert queries.find_by_type("Dragon") == []

    def test_skips_pokemon_without_types(self, queries: QueryService, mutations: MutationService) -> None:
        mutations.add_pokemon(id="151", name="Mew")
        assert [p.name for p in queries.find_by_type("Water")] == ["Squirtle"]


class TestFindByAttack:
    def test_shared_attack_returns_each_pokemon(self, queries: QueryService) -> None:
        assert [p.name for p in queries.find_by_attack("Tackle")] == ["Bulbasaur", "Squirtle"]

    def test_special_attacks_are_scanned(self, queries: QueryService) -> None:
        assert [p.name for p in queries.find_by_attack("Flamethrower")] == ["Charmander"]

    def test_repeated_attack_yields_duplicate_entries(self, store: CatalogStore, queries: QueryService) -> None:
        squirtle = store.pokemon[2]
        squirtle.attacks.special.append(Attack(name="Tackle", type="Normal", damage=12))
        names = [p.name for p in queries.find_by_attack("Tackle")]
        assert names == ["Bulbasaur", "Squirtle", "Squirtle"]

    def test_bucket_attacks_are_not_scanned(self, queries: QueryService, mutations: MutationService) -> None:
        mutations.add_attack("fast", name="Mud Shot", type="Ground", damage=6)
        assert queries.find_by_attack("Mud Shot") == []

    def test_skips_pokemon_without_attacks(self, queries: QueryService, mutations: MutationService) -> None:
        mutations.add_pokemon(id="151", name="Mew")
        mutations.edit_pokemon("Squirtle", "attacks", "none")
        assert [p.name for p in queries.find_by_attack("Tackle")] == ["Bulbasaur"]

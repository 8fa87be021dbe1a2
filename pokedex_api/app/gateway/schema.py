"""
GraphQL schema for the catalog.

The schema models the full record shape held in the store, the
read-only queries and the add/edit/remove mutations.  Every field is
nullable: a lookup that finds nothing resolves to ``null`` rather than
an error.
"""

from graphql import GraphQLSchema, build_schema

SCHEMA_SDL = """
type Pokemon {
  id: String
  name: String
  classification: String
  types: [String]
  resistant: [String]
  weakness: [String]
  weight: Weight
  height: Height
  fleeRate: Float
  evolutionRequirements: EvolutionRequirement
  evolutions: [Evolutions]
  maxCP: Int
  maxHP: Int
  attacks: AttackType
}

type Weight {
  minimum: String
  maximum: String
}

type Height {
  minimum: String
  maximum: String
}

type EvolutionRequirement {
  amount: Int
  name: String
}

type AttackType {
  fast: [Attack]
  special: [Attack]
}

type Attack {
  name: String
  type: String
  damage: Int
}

type Evolutions {
  id: String
  name: String
}

type Query {
  Pokemons: [Pokemon]
  Pokemon(name: String, id: String): Pokemon
  Types: [String]
  Attacks: AttackType
  Attack(type: String): [Attack]
  PokemonByType(name: String): [Pokemon]
  PokemonByAttack(name: String): [Pokemon]
}

input pokemonInput {
  id: String
  name: String
  classification: String
}

input pokemonEdit {
  name: String
  editField: String
  editValue: String
}

input pokemonRemove {
  name: String
}

input attackInput {
  fastOrSpecial: String
  name: String
  type: String
  damage: Int
}

input attackEdit {
  fastOrSpecial: String
  name: String
  editField: String
  editValue: String
}

input attackRemove {
  fastOrSpecial: String
  name: String
}

input typeInput {
  name: String
}

input typeEdit {
  name: String
  newName: String
}

type Mutation {
  addPokemon(input: pokemonInput): Pokemon
  editPokemon(input: pokemonEdit): Pokemon
  removePokemon(input: pokemonRemove): [Pokemon]
  addAttack(input: attackInput): Attack
  editAttack(input: attackEdit): Attack
  removeAttack(input: attackRemove): AttackType
  addType(input: typeInput): [String]
  editType(input: typeEdit): [String]
  removeType(input: typeInput): [String]
}
"""

schema: GraphQLSchema = build_schema(SCHEMA_SDL)

"""
Modifier semantics: how a raw modifier key and value read to a player.

Every known modifier maps to a Modifier descriptor with its display name,
whether it is shown as a percentage or a flat number, whether a positive
value is good or bad, and the multiplier applied before display.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class ModifierFormat(Enum):
    PERCENT = 'percent'
    FLAT = 'flat'
    NONE = 'none'


class ModifierNormal(Enum):
    POSITIVE = 'positive'  # more is better
    NEGATIVE = 'negative'  # more is worse


PERCENT = ModifierFormat.PERCENT
FLAT = ModifierFormat.FLAT
NONE = ModifierFormat.NONE
POSITIVE = ModifierNormal.POSITIVE
NEGATIVE = ModifierNormal.NEGATIVE

# Stored with the opposite sign to the one the game displays
INVERTED = frozenset({
    'reduced_liberty_desire',
    'reduced_liberty_desire_on_same_continent',
})


@dataclass(frozen=True)
class Modifier:
    id: str
    name: str
    format: ModifierFormat = NONE
    normal: ModifierNormal = POSITIVE
    multiplier: int = 1

    def to_human_readable(self, amount: float) -> str:
        """Signed display string, e.g. 0.1 -> "+10%"."""
        if self.format is NONE:
            return ''

        if self.id in INVERTED:
            sign = '-' if amount > 0 else '+'
        else:
            sign = '-' if amount < 0 else '+'

        scaled = abs(amount * self.multiplier)
        if self.format is PERCENT:
            # round half away from zero
            return f"{sign}{int(scaled + 0.5)}%"
        return f"{sign}{_format_number(scaled)}"

    def is_beneficial(self, amount: float) -> bool:
        """Whether a stored value helps the country that has it.

        Judged on the stored value, so inverted keys need no special case.
        """
        if amount == 0:
            return True
        return (amount > 0) == (self.normal is POSITIVE)


def _format_number(value: float) -> str:
    text = f"{value:.4f}".rstrip('0').rstrip('.')
    return text or '0'


def get_modifier(key: str) -> Optional[Modifier]:
    """Descriptor for a raw modifier key (case-insensitive), or None."""
    return MODIFIERS.get(key.lower())


def localise_strings(key: str, value: str) -> Optional[tuple]:
    """
    (display name, display value) for a raw modifier entry.

    Returns None for unknown keys so callers can skip them. Values that are
    not numbers are passed through unchanged.
    """
    modifier = get_modifier(key)
    if modifier is None:
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return modifier.name, value
    return modifier.name, modifier.to_human_readable(amount)


_TABLE = [
    ("accept_vassalization_reasons", "Vassalization Acceptance", FLAT, POSITIVE, 1),
    ("acolytes_influence_modifier", "Acolytes Influence", PERCENT, POSITIVE, 100),
    ("adeen_loyalty_modifier", "Adeen Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("adm_advisor_cost", "Administrative Advisor Cost", PERCENT, NEGATIVE, 100),
    ("adm_tech_cost_modifier", "Administrative Technology Cost", PERCENT, NEGATIVE, 100),
    ("administrative_efficiency", "Administrative Efficiency", PERCENT, POSITIVE, 100),
    ("admiral_cost", "Admiral Cost", PERCENT, NEGATIVE, 100),
    ("adventurers_loyalty_modifier", "Adventurers Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("advisor_cost", "Advisor Cost", PERCENT, NEGATIVE, 100),
    ("advisor_pool", "Possible Advisors", FLAT, POSITIVE, 1),
    ("ae_impact", "Aggressive Expansion Impact", PERCENT, NEGATIVE, 100),
    ("ahati_loyalty_modifier", "Ahati Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("all_estate_loyalty_equilibrium", "All Estates' Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("all_power_cost", "All Power Costs", PERCENT, NEGATIVE, 100),
    ("allowed_marine_fraction", "Marines Force Limit", PERCENT, POSITIVE, 100),
    ("allowed_rajput_fraction", "Allowed Rajput Fraction", PERCENT, POSITIVE, 100),
    ("army_tradition", "Yearly Army Tradition", FLAT, POSITIVE, 1),
    ("army_tradition_decay", "Yearly Army Tradition Decay", PERCENT, NEGATIVE, 100),
    ("army_tradition_from_battle", "Army Tradition From Battles", PERCENT, POSITIVE, 100),
    ("artificers_loyalty_modifier", "Artificers Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("artillery_barrage_cost", "Artillery Barrage Cost", PERCENT, NEGATIVE, 100),
    ("artillery_cost", "Artillery Cost", PERCENT, NEGATIVE, 100),
    ("artillery_fire", "Artillery Fire", FLAT, POSITIVE, 1),
    ("artillery_power", "Artillery Combat Ability", PERCENT, POSITIVE, 100),
    ("artillery_shock", "Artillery Shock", FLAT, POSITIVE, 1),
    ("assault_fort_ability", "Assault Fort ability", PERCENT, POSITIVE, 100),
    ("autonomy_change_time", "Autonomy Change Cooldown", PERCENT, NEGATIVE, 100),
    ("available_province_loot", "Available Loot", PERCENT, POSITIVE, 100),
    ("backrow_artillery_damage", "Artillery Damage from Back Row", PERCENT, POSITIVE, 100),
    ("blockade_efficiency", "Blockade Efficiency", PERCENT, POSITIVE, 100),
    ("build_cost", "Construction Cost", PERCENT, NEGATIVE, 100),
    ("build_time", "Construction Time", PERCENT, NEGATIVE, 100),
    ("burghers_loyalty_modifier", "Burghers Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("can_fabricate_for_vassals", "May Fabricate Claims for Subjects", NONE, POSITIVE, 1),
    ("candidate_random_bonus", "Random Candidate Bonus", FLAT, POSITIVE, 1),
    ("capture_ship_chance", "Chance to Capture Enemy Ships", PERCENT, POSITIVE, 100),
    ("caravan_power", "Caravan Power", PERCENT, POSITIVE, 100),
    ("cav_to_inf_ratio", "Cavalry to Infantry Ratio", PERCENT, POSITIVE, 100),
    ("cavalry_cost", "Cavalry Cost", PERCENT, NEGATIVE, 100),
    ("cavalry_fire", "Cavalry Fire", FLAT, POSITIVE, 1),
    ("cavalry_flanking", "Cavalry Flanking Ability", PERCENT, POSITIVE, 100),
    ("cavalry_power", "Cavalry Combat Ability", PERCENT, POSITIVE, 100),
    ("cavalry_shock", "Cavalry Shock", FLAT, POSITIVE, 1),
    ("center_of_trade_upgrade_cost", "Center of Trade Upgrade Cost", PERCENT, NEGATIVE, 100),
    ("church_loyalty_modifier", "Clergy Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("church_power_modifier", "Religious Power", PERCENT, POSITIVE, 100),
    ("claim_duration", "Claim Duration", PERCENT, POSITIVE, 100),
    ("coast_raid_range", "Coastal Raiding Range", FLAT, POSITIVE, 1),
    ("colonist_placement_chance", "Settler Chance", PERCENT, POSITIVE, 100),
    ("colonists", "Colonists", FLAT, POSITIVE, 1),
    ("core_creation", "Core-Creation Cost", PERCENT, NEGATIVE, 100),
    ("core_decay_on_your_own", "Foreign Core Duration", PERCENT, NEGATIVE, 100),
    ("culture_conversion_cost", "Culture Conversion Cost", PERCENT, NEGATIVE, 100),
    ("culture_conversion_time", "Culture Conversion Time", PERCENT, NEGATIVE, 100),
    ("defensiveness", "Fort Defence", PERCENT, POSITIVE, 100),
    ("development_cost", "Development Cost", PERCENT, NEGATIVE, 100),
    ("development_cost_in_primary_culture", "Development Cost in Primary Culture", PERCENT, NEGATIVE, 100),
    ("devotion", "Yearly Devotion", FLAT, POSITIVE, 1),
    ("dip_advisor_cost", "Diplomatic Advisor Cost", PERCENT, NEGATIVE, 100),
    ("dip_tech_cost_modifier", "Diplomatic Technology Cost", PERCENT, NEGATIVE, 100),
    ("diplomatic_annexation_cost", "Diplomatic Annexation Cost", PERCENT, NEGATIVE, 100),
    ("diplomatic_reputation", "Diplomatic Reputation", FLAT, POSITIVE, 1),
    ("diplomatic_upkeep", "Diplomatic Relations", FLAT, POSITIVE, 1),
    ("diplomats", "Diplomats", FLAT, POSITIVE, 1),
    ("discipline", "Discipline", PERCENT, POSITIVE, 100),
    ("discovered_relations_impact", "Covert Action Relation Impact", PERCENT, NEGATIVE, 100),
    ("disengagement_chance", "Ship Disengagement Chance", PERCENT, POSITIVE, 100),
    ("dragon_command_influence_modifier", "Dragon Command Influence", PERCENT, POSITIVE, 100),
    ("dragon_command_loyalty_modifier", "Dragon Command Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("drill_decay_modifier", "Regiment Drill Loss", PERCENT, NEGATIVE, 100),
    ("drill_gain_modifier", "Army Drill Gain Modifier", PERCENT, POSITIVE, 100),
    ("elephant_command_influence_modifier", "Elephant Command Influence", PERCENT, POSITIVE, 100),
    ("elephant_command_loyalty_modifier", "Elephant Command Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("embargo_efficiency", "Embargo Efficiency", PERCENT, POSITIVE, 100),
    ("embracement_cost", "Institution Embracement Cost", PERCENT, NEGATIVE, 100),
    ("enforce_religion_cost", "Cost of enforcing religion through war", PERCENT, NEGATIVE, 100),
    ("envoy_travel_time", "Envoy Travel Time", PERCENT, NEGATIVE, 100),
    ("establish_order_cost", "Establish Local Organization Cost", PERCENT, NEGATIVE, 100),
    ("expand_administration_cost", "Expand Administration Cost", PERCENT, NEGATIVE, 100),
    ("fabricate_claims_cost", "Cost to fabricate claims", PERCENT, NEGATIVE, 100),
    ("female_advisor_chance", "Female Advisor Chance", PERCENT, POSITIVE, 100),
    ("fire_damage", "Land Fire Damage", PERCENT, POSITIVE, 100),
    ("fire_damage_received", "Fire Damage Received", PERCENT, NEGATIVE, 100),
    ("flagship_cost", "Flagship Cost", PERCENT, NEGATIVE, 100),
    ("fort_maintenance_modifier", "Fort Maintenance", PERCENT, NEGATIVE, 100),
    ("free_adm_policy", "Administrative Free Policies", FLAT, POSITIVE, 1),
    ("free_dip_policy", "Diplomatic Free Policies", FLAT, POSITIVE, 1),
    ("free_land_leader_pool", "Land Leader(s) without Upkeep", FLAT, POSITIVE, 1),
    ("free_leader_pool", "Leader(s) without Upkeep", FLAT, POSITIVE, 1),
    ("free_mil_policy", "Military Free Policies", FLAT, POSITIVE, 1),
    ("free_policy", "Free Policies", FLAT, POSITIVE, 1),
    ("galley_cost", "Galley Cost", PERCENT, NEGATIVE, 100),
    ("galley_power", "Galley Combat Ability", PERCENT, POSITIVE, 100),
    ("garrison_size", "Garrison Size", PERCENT, POSITIVE, 100),
    ("general_cost", "General Cost", PERCENT, NEGATIVE, 100),
    ("global_autonomy", "Monthly Autonomy Change", FLAT, NEGATIVE, 1),
    ("global_colonial_growth", "Global Settler Increase", FLAT, POSITIVE, 1),
    ("global_foreign_trade_power", "Trade Power Abroad", PERCENT, POSITIVE, 100),
    ("global_garrison_growth", "National Garrison Growth", PERCENT, POSITIVE, 100),
    ("global_heathen_missionary_strength", "Missionary Strength vs Heathens", PERCENT, POSITIVE, 100),
    ("global_heretic_missionary_strength", "Missionary Strength vs Heretics", PERCENT, POSITIVE, 100),
    ("global_institution_spread", "Institution Spread", PERCENT, POSITIVE, 100),
    ("global_manpower_modifier", "National Manpower Modifier", PERCENT, POSITIVE, 100),
    ("global_missionary_strength", "Missionary Strength", PERCENT, POSITIVE, 100),
    ("global_monthly_devastation", "Global Monthly Devastation", FLAT, NEGATIVE, 1),
    ("global_naval_barrage_cost", "Naval Barrage cost", PERCENT, NEGATIVE, 100),
    ("global_naval_engagement_modifier", "Global Naval Engagement Modifier", PERCENT, POSITIVE, 100),
    ("global_own_trade_power", "Domestic Trade Power", PERCENT, POSITIVE, 100),
    ("global_prosperity_growth", "Global Prosperity Growth", PERCENT, POSITIVE, 100),
    ("global_prov_trade_power_modifier", "Provincial Trade Power Modifier", PERCENT, POSITIVE, 100),
    ("global_rebel_suppression_efficiency", "Rebel Suppression Efficiency", PERCENT, POSITIVE, 100),
    ("global_regiment_cost", "Regiment Costs", PERCENT, NEGATIVE, 100),
    ("global_regiment_recruit_speed", "Recruitment Time", PERCENT, NEGATIVE, 100),
    ("global_sailors", "Sailor Increase", FLAT, POSITIVE, 1),
    ("global_sailors_modifier", "National Sailors Modifier", PERCENT, POSITIVE, 100),
    ("global_ship_cost", "Ship Costs", PERCENT, NEGATIVE, 100),
    ("global_ship_recruit_speed", "Shipbuilding Time", PERCENT, NEGATIVE, 100),
    ("global_ship_repair", "Global Ship Repair", PERCENT, POSITIVE, 100),
    ("global_ship_trade_power", "Ship Trade Power", PERCENT, POSITIVE, 100),
    ("global_spy_defence", "Foreign Spy Detection", PERCENT, POSITIVE, 100),
    ("global_supply_limit_modifier", "National Supply Limit Modifier", PERCENT, POSITIVE, 100),
    ("global_tariffs", "Merchants", PERCENT, POSITIVE, 100),
    ("global_tax_modifier", "National Tax Modifier", PERCENT, POSITIVE, 100),
    ("global_trade_goods_size_modifier", "Goods Produced Modifier", PERCENT, POSITIVE, 100),
    ("global_trade_power", "Global Trade Power", PERCENT, POSITIVE, 100),
    ("global_unrest", "National Unrest", FLAT, NEGATIVE, 1),
    ("governing_capacity_modifier", "Governing Capacity Modifier", PERCENT, POSITIVE, 100),
    ("great_project_upgrade_cost", "Great Project Upgrade Cost", PERCENT, NEGATIVE, 100),
    ("harsh_treatment_cost", "Harsh Treatment Cost", PERCENT, NEGATIVE, 100),
    ("heavy_ship_cost", "Heavy Ship Cost", PERCENT, NEGATIVE, 100),
    ("heavy_ship_hull_size_modifier", "Heavy Ship Hull Size", PERCENT, POSITIVE, 100),
    ("heavy_ship_power", "Heavy Ship Combat Ability", PERCENT, POSITIVE, 100),
    ("heir_chance", "Chance of New Heir", PERCENT, POSITIVE, 100),
    ("horde_unity", "Yearly Horde Unity", FLAT, POSITIVE, 1),
    ("hostile_attrition", "Attrition for Enemies", FLAT, POSITIVE, 1),
    ("hull_size_modifier", "Ship Hull Size", PERCENT, POSITIVE, 100),
    ("idea_claim_colonies", "Can Fabricate Claims in any colonial region belonging to another nation who are also overseas from the province, or to their colonial nations", NONE, POSITIVE, 1),
    ("idea_cost", "Idea Cost", PERCENT, NEGATIVE, 100),
    ("imperial_authority", "Imperial Authority Growth Modifier", PERCENT, POSITIVE, 100),
    ("imperial_mandate", "Monthly Mandate", FLAT, POSITIVE, 1),
    ("improve_relation_modifier", "Improve Relations", PERCENT, POSITIVE, 100),
    ("infantry_cost", "Infantry Cost", PERCENT, NEGATIVE, 100),
    ("infantry_fire", "Infantry Fire", FLAT, POSITIVE, 1),
    ("infantry_power", "Infantry Combat Ability", PERCENT, POSITIVE, 100),
    ("infantry_shock", "Infantry Shock", FLAT, POSITIVE, 1),
    ("inflation_action_cost", "Reduce Inflation Cost", PERCENT, NEGATIVE, 100),
    ("inflation_reduction", "Yearly Inflation Reduction", FLAT, POSITIVE, 1),
    ("innovativeness_gain", "Innovativeness Gain", PERCENT, POSITIVE, 100),
    ("institution_spread_from_true_faith", "Institution Spread In True Faith Provinces", PERCENT, POSITIVE, 100),
    ("interest", "Interest Per Annum", FLAT, NEGATIVE, 1),
    ("justify_trade_conflict_cost", "Cost to justify trade conflict", PERCENT, NEGATIVE, 100),
    ("land_attrition", "Land Attrition", PERCENT, NEGATIVE, 100),
    ("land_forcelimit_modifier", "Land Force Limit Modifier", PERCENT, POSITIVE, 100),
    ("land_maintenance_modifier", "Land Maintenance Modifier", PERCENT, NEGATIVE, 100),
    ("land_morale", "Morale of Armies", PERCENT, POSITIVE, 100),
    ("leader_cost", "Leader Cost", PERCENT, NEGATIVE, 100),
    ("leader_land_fire", "Land Leader Fire", FLAT, POSITIVE, 1),
    ("leader_land_manuever", "Land Leader Manoeuvre", FLAT, POSITIVE, 1),
    ("leader_land_shock", "Land Leader Shock", FLAT, POSITIVE, 1),
    ("leader_naval_fire", "Naval Leader Fire", FLAT, POSITIVE, 1),
    ("leader_naval_manuever", "Naval Leader Manoeuvre", FLAT, POSITIVE, 1),
    ("leader_naval_shock", "Naval Leader Shock", FLAT, POSITIVE, 1),
    ("leader_siege", "Leader Siege", FLAT, POSITIVE, 1),
    ("legitimacy", "Yearly Legitimacy", FLAT, POSITIVE, 1),
    ("liberty_desire_from_subject_development", "Liberty Desire from Subject Development", PERCENT, NEGATIVE, 100),
    ("light_ship_cost", "Light Ship Cost", PERCENT, NEGATIVE, 100),
    ("light_ship_power", "Light Ship Combat Ability", PERCENT, POSITIVE, 100),
    ("loot_amount", "Looting Speed", PERCENT, POSITIVE, 100),
    ("lowercastes_loyalty_modifier", "Lower Castes Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("mages_loyalty_modifier", "Mages Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("manpower_in_accepted_culture_provinces", "Manpower in Accepted Culture provinces", PERCENT, POSITIVE, 100),
    ("manpower_in_culture_group_provinces", "Manpower in same Culture Group provinces", PERCENT, POSITIVE, 100),
    ("manpower_in_own_culture_provinces", "Manpower in Primary Culture provinces", PERCENT, POSITIVE, 100),
    ("manpower_in_true_faith_provinces", "Manpower in True Faith provinces", PERCENT, POSITIVE, 100),
    ("manpower_recovery_speed", "Manpower Recovery Speed", PERCENT, POSITIVE, 100),
    ("max_absolutism", "Maximum Absolutism", FLAT, POSITIVE, 1),
    ("max_absolutism_effect", "Max Effect of Absolutism", PERCENT, POSITIVE, 100),
    ("max_general_maneuver", "Max General Manoeuvre", FLAT, POSITIVE, 1),
    ("max_hostile_attrition", "Max Hostile Attrition", FLAT, POSITIVE, 1),
    ("max_revolutionary_zeal", "Maximum Revolutionary Zeal", FLAT, POSITIVE, 1),
    ("may_explore", "Allows recruitment of explorers & conquistadors", NONE, POSITIVE, 1),
    ("may_perform_slave_raid", "May Raid Coasts", NONE, POSITIVE, 1),
    ("may_perform_slave_raid_on_same_religion", "May Raid Coasts, including coasts of countries with same religion", NONE, POSITIVE, 1),
    ("may_recruit_female_generals", "May Recruit Female Generals", NONE, POSITIVE, 1),
    ("merc_leader_army_tradition", "Mercenary Leader Army Tradition", PERCENT, POSITIVE, 100),
    ("merc_maintenance_modifier", "Mercenary Maintenance", PERCENT, NEGATIVE, 100),
    ("mercantilism_cost", "Cost to Promote Mercantilism", PERCENT, NEGATIVE, 100),
    ("mercenary_cost", "Mercenary Cost", PERCENT, NEGATIVE, 100),
    ("mercenary_discipline", "Mercenary Discipline", PERCENT, POSITIVE, 100),
    ("mercenary_manpower", "Mercenary Manpower", PERCENT, POSITIVE, 100),
    ("merchants", "Merchants", FLAT, POSITIVE, 1),
    ("migration_cost", "Migration Cost", PERCENT, NEGATIVE, 100),
    ("mil_advisor_cost", "Military Advisor Cost", PERCENT, NEGATIVE, 100),
    ("mil_tech_cost_modifier", "Military Technology Cost", PERCENT, NEGATIVE, 100),
    ("missionaries", "Missionaries", FLAT, POSITIVE, 1),
    ("missionary_maintenance_cost", "Missionary Maintenance Cost", PERCENT, NEGATIVE, 100),
    ("monarch_admin_power", "Monarch Administrative Skill", FLAT, POSITIVE, 1),
    ("monarch_diplomatic_power", "Monarch Diplomatic Skill", FLAT, POSITIVE, 1),
    ("monarch_lifespan", "Average Monarch Lifespan", PERCENT, POSITIVE, 100),
    ("monarch_military_power", "Monarch Military Skill", FLAT, POSITIVE, 1),
    ("monstrous_tribes_loyalty_modifier", "Monstrous Tribes Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("monthly_church_power", "Monthly Faith Power", PERCENT, POSITIVE, 100),
    ("monthly_fervor_increase", "Monthly Fervour", FLAT, POSITIVE, 1),
    ("monthly_gold_inflation_modifier", "Monthly Gold Inflation Multiplier", PERCENT, NEGATIVE, 100),
    ("monthly_heir_claim_increase", "Monthly Heir Claim Increase", FLAT, POSITIVE, 1),
    ("monthly_reform_progress_modifier", "Monthly Reform Progress Modifier", PERCENT, POSITIVE, 100),
    ("monthly_splendor", "Monthly Splendour", FLAT, POSITIVE, 1),
    ("morale_damage", "Morale Damage", PERCENT, POSITIVE, 100),
    ("morale_damage_received", "Morale Damage Received", PERCENT, NEGATIVE, 100),
    ("move_capital_cost_modifier", "Move Capital cost modifier", PERCENT, NEGATIVE, 100),
    ("movement_speed", "Movement Speed", PERCENT, POSITIVE, 100),
    ("movement_speed_in_fleet_modifier", "Fleet Movement Speed", PERCENT, POSITIVE, 100),
    ("movement_speed_onto_off_boat_modifier", "Movement Speed On and Off Ships", PERCENT, POSITIVE, 100),
    ("national_focus_years", "Change National Focus Cooldown Years", FLAT, NEGATIVE, 1),
    ("native_assimilation", "Native Assimilation", PERCENT, POSITIVE, 100),
    ("native_uprising_chance", "Native Uprising Chance", PERCENT, NEGATIVE, 100),
    ("naval_attrition", "Naval Attrition", PERCENT, NEGATIVE, 100),
    ("naval_forcelimit_modifier", "Naval Force Limit Modifier", PERCENT, POSITIVE, 100),
    ("naval_maintenance_modifier", "Naval Maintenance Modifier", PERCENT, NEGATIVE, 100),
    ("naval_morale", "Morale of Navies", PERCENT, POSITIVE, 100),
    ("naval_morale_damage", "Naval Morale Damage", PERCENT, POSITIVE, 100),
    ("naval_morale_damage_received", "Naval Morale Damage Received", PERCENT, NEGATIVE, 100),
    ("naval_tradition_from_battle", "Naval Tradition From Battles", PERCENT, POSITIVE, 100),
    ("naval_tradition_from_trade", "Naval Tradition From Trade", PERCENT, POSITIVE, 100),
    ("navy_tradition", "Yearly Navy Tradition", FLAT, POSITIVE, 1),
    ("navy_tradition_decay", "Yearly Naval Tradition Decay", PERCENT, NEGATIVE, 100),
    ("no_religion_penalty", "Heretic and heathen provinces do not give any penalties", NONE, POSITIVE, 1),
    ("nobles_influence_modifier", "Nobility Influence", PERCENT, NEGATIVE, 100),
    ("nobles_loyalty_modifier", "Nobility Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("num_accepted_cultures", "Max Promoted Cultures", FLAT, POSITIVE, 1),
    ("number_of_cannons_modifier", "Number of Cannons Modifier", PERCENT, NEGATIVE, 100),
    ("own_coast_naval_combat_bonus", "Naval Combat Bonus off owned coast", FLAT, POSITIVE, 1),
    ("papal_influence", "Yearly Rectorate Influence", FLAT, POSITIVE, 1),
    ("papal_influence_from_cardinals", "Rectorate Influence from Veridicals", PERCENT, POSITIVE, 100),
    ("placed_merchant_power", "Merchant Trade Power", FLAT, POSITIVE, 1),
    ("possible_adm_policy", "Administrative Possible Policies", FLAT, POSITIVE, 1),
    ("possible_condottieri", "Possible Condottieri", PERCENT, POSITIVE, 100),
    ("possible_dip_policy", "Diplomatic Possible Policies", FLAT, POSITIVE, 1),
    ("possible_mil_policy", "Military Possible Policies", FLAT, POSITIVE, 1),
    ("possible_policy", "Possible Policies", FLAT, POSITIVE, 1),
    ("power_projection_from_insults", "Power Projection From Insults", PERCENT, POSITIVE, 100),
    ("prestige", "Yearly Prestige", FLAT, POSITIVE, 1),
    ("prestige_decay", "Prestige Decay", PERCENT, NEGATIVE, 100),
    ("prestige_from_land", "Prestige from Land battles", PERCENT, POSITIVE, 100),
    ("prestige_from_naval", "Prestige from Naval battles", PERCENT, POSITIVE, 100),
    ("prestige_per_development_from_conversion", "Prestige per Development From Conversion", PERCENT, POSITIVE, 100),
    ("privateer_efficiency", "Privateer Efficiency", PERCENT, POSITIVE, 100),
    ("production_efficiency", "Production Efficiency", PERCENT, POSITIVE, 100),
    ("promote_culture_cost", "Promote Culture Cost", PERCENT, NEGATIVE, 100),
    ("province_warscore_cost", "Province War Score Cost", PERCENT, NEGATIVE, 100),
    ("raj_ministries_loyalty_modifier", "Raj Ministries Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("range", "Colonial Range", PERCENT, POSITIVE, 100),
    ("raze_power_gain", "Razing Power Gain", PERCENT, POSITIVE, 100),
    ("rebel_support_efficiency", "Rebel Support Efficiency", PERCENT, POSITIVE, 100),
    ("recover_army_morale_speed", "Recover Army Morale Speed", PERCENT, POSITIVE, 100),
    ("reduced_liberty_desire", "Liberty Desire in Subjects", PERCENT, POSITIVE, 1),
    ("reduced_liberty_desire_on_other_continent", "Liberty Desire in Other Continent Subjects", PERCENT, POSITIVE, 1),
    ("reduced_liberty_desire_on_same_continent", "Liberty Desire in Same Continent Subjects", PERCENT, POSITIVE, 1),
    ("reelection_cost", "Reelection Cost", PERCENT, NEGATIVE, 100),
    ("reform_progress_growth", "Reform Progress Growth", PERCENT, POSITIVE, 100),
    ("reinforce_cost_modifier", "Reinforce Cost", PERCENT, NEGATIVE, 100),
    ("reinforce_speed", "Reinforce Speed", PERCENT, POSITIVE, 100),
    ("religious_unity", "Religious Unity", PERCENT, POSITIVE, 100),
    ("republican_tradition", "Yearly Republican Tradition", FLAT, POSITIVE, 1),
    ("reserves_organisation", "Reduced Morale Damage Taken By Reserves", PERCENT, POSITIVE, 100),
    ("rival_border_fort_maintenance", "Fort Maintenance on Border with Rival", PERCENT, NEGATIVE, 100),
    ("rival_change_cost", "Change Rival Cost", PERCENT, NEGATIVE, 100),
    ("sailor_maintenance_modifer", "Sailor Maintenance", PERCENT, NEGATIVE, 100),
    ("sailor_maintenance_modifier", "Sailor Maintenance", PERCENT, NEGATIVE, 100),
    ("sailors_recovery_speed", "Sailor Recovery Speed", PERCENT, POSITIVE, 100),
    ("same_culture_advisor_cost", "Cost of Advisors with Ruler's Culture", PERCENT, NEGATIVE, 100),
    ("same_religion_advisor_cost", "Cost of Advisors with Ruler's Religion", PERCENT, NEGATIVE, 100),
    ("sea_repair", "Ships can repair when in coastal sea zones", NONE, POSITIVE, 1),
    ("ship_durability", "Ship Durability", PERCENT, POSITIVE, 100),
    ("ship_power_propagation", "Ship Tradepower Propagation", PERCENT, POSITIVE, 100),
    ("shock_damage", "Shock Damage", PERCENT, POSITIVE, 100),
    ("shock_damage_received", "Shock Damage Received", PERCENT, NEGATIVE, 100),
    ("siege_ability", "Siege Ability", PERCENT, POSITIVE, 100),
    ("siege_blockade_progress", "Blockade Impact on Siege", FLAT, POSITIVE, 1),
    ("spy_action_cost_modifier", "Spy Action Cost Modifier", PERCENT, NEGATIVE, 100),
    ("spy_offence", "Spy Network Construction", PERCENT, POSITIVE, 100),
    ("stability_cost_modifier", "Stability Cost Modifier", PERCENT, NEGATIVE, 100),
    ("stability_cost_to_declare_war", "Stability Hit to Declare War", FLAT, NEGATIVE, 1),
    ("state_governing_cost", "States Governing Cost", PERCENT, NEGATIVE, 100),
    ("state_maintenance_modifier", "State Maintenance", PERCENT, NEGATIVE, 100),
    ("sunk_ship_morale_hit_received", "Morale Hit When Losing a Ship", PERCENT, NEGATIVE, 100),
    ("sunk_ship_morale_hit_recieved", "Morale Hit When Losing a Ship", PERCENT, NEGATIVE, 100),
    ("supply_limit_modifier", "Supply Limit Modifier", PERCENT, POSITIVE, 100),
    ("technology_cost", "Technology Cost", PERCENT, NEGATIVE, 100),
    ("tiger_command_influence_modifier", "Tiger Command Influence", PERCENT, POSITIVE, 100),
    ("tiger_command_loyalty_modifier", "Tiger Command Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("tolerance_heathen", "Tolerance of Heathens", FLAT, POSITIVE, 1),
    ("tolerance_heretic", "Tolerance of Heretics", FLAT, POSITIVE, 1),
    ("tolerance_own", "Tolerance of the True Faith", FLAT, POSITIVE, 1),
    ("trade_company_investment_cost", "Trade Company Investment Cost", PERCENT, NEGATIVE, 100),
    ("trade_efficiency", "Trade Efficiency", PERCENT, POSITIVE, 100),
    ("trade_range_modifier", "Trade Range", PERCENT, POSITIVE, 100),
    ("trade_steering", "Trade Steering", PERCENT, POSITIVE, 100),
    ("transport_cost", "Transport Cost", PERCENT, NEGATIVE, 100),
    ("transport_power", "Transport Ship Combat Ability", PERCENT, POSITIVE, 100),
    ("unjustified_demands", "Unjustified Demands", PERCENT, NEGATIVE, 100),
    ("uppercastes_loyalty_modifier", "Upper Castes Loyalty Equilibrium", PERCENT, POSITIVE, 100),
    ("vassal_forcelimit_bonus", "Vassal Force Limit Contribution", PERCENT, POSITIVE, 100),
    ("vassal_income", "Income from Vassals", PERCENT, POSITIVE, 100),
    ("war_exhaustion", "Monthly War Exhaustion", FLAT, NEGATIVE, 1),
    ("war_exhaustion_cost", "Cost of Reducing War Exhaustion", PERCENT, NEGATIVE, 100),
    ("war_taxes_cost_modifier", "War Taxes Cost", PERCENT, NEGATIVE, 100),
    ("warscore_cost_vs_other_religion", "War Score Cost vs Other Religions", PERCENT, NEGATIVE, 100),
    ("yearly_absolutism", "Yearly Absolutism", FLAT, POSITIVE, 1),
    ("yearly_army_professionalism", "Yearly Army Professionalism", PERCENT, POSITIVE, 100),
    ("yearly_corruption", "Yearly Corruption", FLAT, NEGATIVE, 1),
    ("yearly_government_power", "Yearly Government Power", FLAT, POSITIVE, 1),
    ("yearly_harmony", "Yearly Harmony", FLAT, NEGATIVE, 1),
    ("yearly_karma_decay", "Yearly Corinite Paragonhood Decay", FLAT, POSITIVE, 1),
    ("yearly_patriarch_authority", "Yearly Demonic Power", FLAT, NEGATIVE, 1),
    ("years_of_nationalism", "Years of Separatism", FLAT, NEGATIVE, 1),
]

MODIFIERS = MappingProxyType({row[0]: Modifier(*row) for row in _TABLE})

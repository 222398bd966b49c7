"""Compiled-in catalog of screening and diagnostic tests.

Operating characteristics and likelihood ratios are as reported by the
cited study for each test.  Study notes summarise the population, setting
and caveats behind those figures.
"""

from __future__ import annotations

from dxexplorer.catalog._common import StudyNote, TestRecord


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

RECORDS: tuple[TestRecord, ...] = (
    TestRecord("FIT", "Colorectal Cancer", 0.79, 0.94, 13.17, 0.22,
               "Lee JK, et al. (2014), Ann Intern Med",
               "https://pubmed.ncbi.nlm.nih.gov/24658694/"),
    TestRecord("Colonoscopy", "Colorectal Cancer", 0.89, 0.89, 8.09, 0.12,
               "Jennifer S L, et al. (2021), JAMA",
               "https://jamanetwork.com/journals/jama/fullarticle/2779987"),
    TestRecord("Mammography", "Breast Cancer", 0.82, 0.84, 5.12, 0.21,
               "Tadesse GF, et al. (2023), J Ultrasound",
               "https://pubmed.ncbi.nlm.nih.gov/36696046/"),
    TestRecord("Pap Smear", "Cervical Cancer", 0.55, 0.97, 18.33, 0.46,
               "Arbyn M, et al. (2008), Lancet Oncol",
               "https://pubmed.ncbi.nlm.nih.gov/17942871/"),
    TestRecord("HPV DNA", "Cervical Cancer", 0.95, 0.94, 15.83, 0.05,
               "Naucler P, et al. (2007), N Engl J Med",
               "https://pubmed.ncbi.nlm.nih.gov/17942871/"),
    TestRecord("PSA", "Prostate Cancer", 0.92, 0.16, 1.10, 0.50,
               "Yan J, et al. (2022), Investigative and Clinical Urology",
               "https://icurology.org/DOIx.php?id=10.4111/icu.20210429"),
    TestRecord("MRI (mpMRI)", "Prostate Cancer", 0.93, 0.41, 1.58, 0.17,
               "Ahmed HU, et al. (2017), Lancet",
               "https://pubmed.ncbi.nlm.nih.gov/27599140/"),
    TestRecord("D-dimer (POC)", "DVT", 0.85, 0.74, 3.27, 0.20,
               "Geersing GJ, et al. (2009), BMJ 339:b2990",
               "https://www.bmj.com/content/339/bmj.b2990"),
    TestRecord("D-dimer (ELISA)", "VTE (LCP)", 1.00, 0.679, 3.75, 0.00,
               "Pulivarthi S, Gurram MK. (2014), N Am J Med Sci",
               "https://pmc.ncbi.nlm.nih.gov/articles/PMC4215485/"),
    TestRecord("D-dimer (Rapid whole-blood, quantitative)", "VTE (LCP)",
               1.00, 0.733, 3.12, 0.00,
               "Pulivarthi S, Gurram MK. (2014), N Am J Med Sci",
               "https://pmc.ncbi.nlm.nih.gov/articles/PMC4215485/"),
    TestRecord("CTPA", "Pulmonary Embolism", 0.98, 0.94, 16.33, 0.02,
               "Paul D Stein, et al. (2023), NEJM",
               "https://pubmed.ncbi.nlm.nih.gov/16738268/"),
    TestRecord("Rapid Antigen", "COVID-19", 0.73, 0.99, 73.00, 0.27,
               "Dinnes J, et al. (2021), Cochrane",
               "https://pubmed.ncbi.nlm.nih.gov/33760236/"),
    TestRecord("PCR", "COVID-19", 0.80, 0.98, 40.00, 0.20,
               "Sophia Yohe (2020), College of American Pathologists",
               "https://www.cap.org/member-resources/articles/"
               "how-good-are-covid-19-sars-cov-2-diagnostic-pcr-tests"),
    TestRecord("BNP", "Heart Failure", 0.90, 0.74, 3.46, 0.14,
               "Kelmenson DA, et al. (2017), Acad Emerg Med",
               "https://pubmed.ncbi.nlm.nih.gov/17594491/"),
    TestRecord("Troponin (hs)", "Myocardial Infarction", 0.90, 0.78, 4.09, 0.13,
               "NICE Evidence Review. (2020), NICE",
               "https://www.nice.org.uk/guidance/dg40/chapter/3-Evidence"),
    TestRecord("Wells Score", "DVT", 0.77, 0.38, 1.24, 0.61,
               "Johnathan S, et al. (2017), PubMed",
               "https://pubmed.ncbi.nlm.nih.gov/29399531/"),
    TestRecord("Ultrasound", "DVT", 0.96, 0.94, 16.00, 0.04,
               "Goodacre S, et al. (2005), BMJ",
               "https://pubmed.ncbi.nlm.nih.gov/15975199/"),
    TestRecord("Spirometry", "COPD", 0.81, 0.71, 2.79, 0.27,
               "David P Johns, et al. (2014), Journal of Thoracic Disease",
               "https://pmc.ncbi.nlm.nih.gov/articles/PMC4255165/"),
    TestRecord("Dermatoscopy", "Melanoma", 0.90, 0.90, 9.00, 0.11,
               "Kathryn Harrison. (2024), Journal of clinical and aesthetic dermatology",
               "https://pmc.ncbi.nlm.nih.gov/articles/PMC11460753/"),
    TestRecord("CA-125", "Ovarian Cancer", 0.79, 0.78, 3.59, 0.27,
               "Menzin A, et al. (2010), Gynecol Oncol",
               "https://pubmed.ncbi.nlm.nih.gov/20614474/"),
    TestRecord("LDCT", "Lung Cancer", 0.93, 0.77, 4.04, 0.09,
               "Paul F P, et al. (2013), Journal of Medical Screening",
               "https://pubmed.ncbi.nlm.nih.gov/24009092/"),
    TestRecord("Chest X-ray", "Lung Cancer", 0.81, 0.68, 2.53, 0.28,
               "Louis Dwyer-Hemmings, et al. (2021), British Institute of Radiology",
               "https://academic.oup.com/bjro/article/3/1/20210005/7240341"),
)


# ---------------------------------------------------------------------------
# Study notes, keyed by (test, condition)
# ---------------------------------------------------------------------------

STUDY_NOTES: dict[tuple[str, str], StudyNote] = {
    ("Colonoscopy", "Colorectal Cancer"): StudyNote(
        overview=(
            "Evidence review for the USPSTF found high per-patient sensitivity "
            "for ≥6 mm adenomas and cancers; performance varies by lesion size "
            "and operator. Colonoscopy also serves as the reference standard in "
            "most studies."
        ),
        sample_size=(
            "Screening accuracy data across 9 studies for CT colonography "
            "(n=6,497); several of these also reported colonoscopy accuracy; "
            "broader evidence base spans multiple cohorts."
        ),
        population="Asymptomatic, average-risk adults undergoing CRC screening.",
        setting="Multicenter screening programs in high-income countries.",
        design=(
            "Systematic review/evidence report summarizing diagnostic accuracy "
            "and harms; comparative accuracy vs CT colonography."
        ),
        year="Publication year: 2021",
        caveats=(
            "Sensitivity varies by lesion size (higher for ≥10 mm; lower for "
            "diminutive polyps).",
            "Bowel prep quality and operator skill materially affect Se/Sp.",
            "Harms: ~5.4 perforations and ~17.5 major bleeds per 10,000 "
            "follow-up colonoscopies.",
        ),
        extra=(
            "CT colonography with standard prep showed pooled sensitivity ~0.86 "
            "for ≥6 mm adenomas; colonoscopy ~0.89 in the same subset."
        ),
    ),
    ("FIT", "Colorectal Cancer"): StudyNote(
        overview=(
            "Meta-analysis of screening FITs shows moderate sensitivity and high "
            "specificity for CRC; lower positivity thresholds improve "
            "sensitivity at the cost of specificity."
        ),
        sample_size="19 studies included (1996–2013).",
        population="Asymptomatic, average-risk adults in organized/opportunistic screening.",
        setting="Population screening programs; various countries.",
        design="Systematic review and meta-analysis of diagnostic accuracy.",
        year="Publication year: 2014",
        caveats=(
            "Assay brand and cut-off (µg Hb/g) drive trade-offs. Sensitivity for "
            "CRC improved with lower assay cutoff values for a positive test "
            "result (for example, 0.89 [CI, 0.80 to 0.95] at a cutoff value less "
            "than 20 µg/g vs. 0.70 [CI, 0.55 to 0.81] at cutoff values of 20 to "
            "50 µg/g) but with a corresponding decrease in specificity.",
            "Single-sample vs multi-sample strategies show similar accuracy in "
            "pooled analyses.",
        ),
    ),
    ("Mammography", "Breast Cancer"): StudyNote(
        overview=(
            "Narrative review summarizing that screening accuracy depends on age "
            "and breast density; typical pooled estimates ~0.82 sensitivity and "
            "~0.84 specificity in general screening populations."
        ),
        sample_size="Review paper drawing on multiple cohorts (not a single pooled meta-N).",
        population="Asymptomatic screening populations; accuracy varies by age/density.",
        setting="Screening programs and diagnostic clinics.",
        design="Journal review of test accuracy literature.",
        year="Publication year: 2023",
        caveats=(
            "Lower sensitivity in dense breasts; tomosynthesis can improve detection.",
            "Recall/biopsy rates vary by program thresholds.",
        ),
    ),
    ("Pap Smear", "Cervical Cancer"): StudyNote(
        overview=(
            "Cytology detects CIN2+/CIN3+ but is less sensitive than HPV "
            "testing; specificity is higher."
        ),
        sample_size="Large meta-analytic datasets across multiple trials/observational studies.",
        population="Asymptomatic women in organized screening (typically 21–65 y).",
        setting="Population screening programs and clinical settings.",
        design="Comparative meta-analyses and trials vs HPV DNA testing.",
        year="Key evidence years: 2007–2017 (landmark trials/meta-analyses).",
        caveats=(
            "Sampling quality and cytologist expertise affect sensitivity.",
            "Longer screening intervals may miss fast-progressing lesions.",
            "Reflex HPV triage alters effective performance.",
        ),
    ),
    ("HPV DNA", "Cervical Cancer"): StudyNote(
        overview=(
            "Randomized trials show primary high-risk HPV testing is more "
            "sensitive than cytology for CIN2+/CIN3+ and lowers subsequent CIN3+ "
            "incidence; specificity slightly lower than cytology."
        ),
        sample_size="NEJM RCT in Sweden: 12,527 women; multiple trials/meta-analyses beyond this.",
        population="Women in organized screening, often age 30–65.",
        setting="Population-based screening programs.",
        design="Randomized trials; pooled meta-analyses.",
        year="Key trials 2007; meta-analyses 2014+",
        caveats=(
            "Transient infections in younger women → false positives.",
            "Genotype 16/18 risk stratification improves PPV.",
            "Self-collected samples have slightly lower sensitivity vs "
            "clinician-collected.",
        ),
    ),
    ("PSA", "Prostate Cancer"): StudyNote(
        overview=(
            "Systematic review/meta-analysis shows high sensitivity but very "
            "poor specificity for PSA near traditional cutoffs; many benign "
            "conditions elevate PSA."
        ),
        sample_size="11 studies in meta-analysis focused on PSA <4 ng/mL cutoffs.",
        population="Men undergoing evaluation for possible prostate cancer.",
        setting="Outpatient/urology; hospital cohorts.",
        design="Systematic review and meta-analysis of diagnostic accuracy.",
        year="Publication year: 2022",
        caveats=(
            "Threshold selection (2–4 ng/mL) shifts Se/Sp markedly.",
            "Consider age-specific ranges, %free PSA, PSAD, and MRI pathways.",
        ),
    ),
    ("MRI (mpMRI)", "Prostate Cancer"): StudyNote(
        overview=(
            "PROMIS trial showed mpMRI has very high sensitivity and NPV for "
            "clinically significant prostate cancer and can triage men before "
            "biopsy; specificity is modest and reader-dependent."
        ),
        sample_size="740 men (paired validating study).",
        population="Men with elevated PSA referred for biopsy.",
        setting="Tertiary centers with experienced readers; 1.5T mpMRI.",
        design=(
            "Prospective paired diagnostic accuracy vs transperineal template "
            "mapping biopsy reference."
        ),
        year="Publication year: 2017",
        caveats=(
            "Reader experience and PI-RADS version influence accuracy.",
            "Inflammation/prostatitis can mimic lesions (false positives).",
            "A negative mpMRI does not absolutely exclude csPCa.",
        ),
    ),
    ("D-dimer (POC)", "DVT"): StudyNote(
        overview=(
            "Qualitative POC D-dimer (SimpliRED) pooled Se 0.85 and Sp 0.74 in "
            "outpatients with suspected venous thromboembolism; suitable for "
            "rule-out in low pretest probability when used with a clinical "
            "decision rule."
        ),
        sample_size="23 studies; n=13,959 (mixed suspected VTE).",
        population="Consecutive outpatients with suspected VTE (includes DVT and PE).",
        setting="Emergency/ambulatory care; near-patient testing.",
        design="Diagnostic meta-analysis (bivariate model).",
        year="Publication year: 2009",
        caveats=(
            "Apply alongside a validated clinical prediction rule (e.g., Wells); "
            "best for low pretest probability.",
            "Qualitative assays show better specificity than some quantitative "
            "platforms but higher LR− with SimpliRED than Cardiac.",
        ),
    ),
    ("D-dimer (ELISA)", "VTE (LCP)"): StudyNote(
        overview=(
            "Central-lab ELISA D-dimer shows ~100% sensitivity in low/non-high "
            "pretest probability cohorts with specificity ~68%, supporting "
            "rule-out when combined with a clinical prediction rule."
        ),
        sample_size="Narrative review summarizing multiple cohorts and meta-analyses through 2011.",
        population="Adults with suspected venous thromboembolism at low clinical probability.",
        setting="ED and ambulatory care; laboratory ELISA assays.",
        design="Evidence review citing meta-analyses and large prospective cohorts.",
        year="Publication year: 2014",
        caveats=(
            "High sensitivity comes with modest specificity → many false "
            "positives; use to rule out, not rule in.",
            "Apply alongside a validated clinical prediction rule (e.g., "
            "Wells/Geneva) and appropriate imaging pathways.",
            "Assay type, timing from symptom onset, age, anticoagulation, and "
            "comorbidity materially affect performance.",
        ),
        extra=(
            "The review also cites meta-analytic sensitivities of 0.96 and 0.94 "
            "across broader cohorts; ELISA/automated latex outperform older "
            "qualitative assays on sensitivity but with lower specificity."
        ),
    ),
    ("D-dimer (Rapid whole-blood, quantitative)", "VTE (LCP)"): StudyNote(
        overview=(
            "Rapid whole-blood quantitative D-dimer demonstrates ~100% "
            "sensitivity with slightly higher specificity (~73%) than ELISA in "
            "low-risk pathways; useful for near-patient rule-out."
        ),
        sample_size="Narrative review summarizing multiple cohorts and meta-analyses through 2011.",
        population="Adults with suspected VTE and low clinical probability.",
        setting="Point-of-care/ED; rapid quantitative platforms.",
        design="Evidence review with assay-comparison data.",
        year="Publication year: 2014",
        caveats=(
            "Despite higher specificity vs ELISA, PPV remains poor; positive "
            "tests require imaging.",
            "Performance degrades if testing is delayed (>~1 week from symptom "
            "onset) or after starting anticoagulation.",
            "Older age, renal dysfunction, inflammation, pregnancy, and cancer "
            "increase false-positive rates.",
        ),
        extra=(
            "VIDAS ELISA reported 100% sensitivity at a 500 μg/L cutoff in a "
            "large management study; overall, ELISA/microplate ELISA/automated "
            "latex assays deliver higher sensitivity but lower specificity than "
            "some alternatives."
        ),
    ),
    ("CTPA", "Pulmonary Embolism"): StudyNote(
        overview=(
            "Modern multidetector CTPA demonstrates very high sensitivity and "
            "specificity for acute PE when technically adequate, and is the "
            "definitive imaging test in most pathways."
        ),
        sample_size=(
            "Large prospective cohorts/registries; classic multicenter studies "
            "report hundreds to thousands of patients."
        ),
        population=(
            "Adults with suspected PE (often moderate/high pretest probability "
            "or elevated D-dimer)."
        ),
        setting="Hospital radiology; ED/inpatient.",
        design="Prospective diagnostic accuracy vs clinical follow-up or catheter angiography.",
        year="Seminal accuracy era mid-2000s onward; widely adopted standard.",
        caveats=(
            "Subsegmental PE significance can be uncertain.",
            "Contrast nephropathy/allergy may preclude use.",
            "Motion/poor opacification can reduce sensitivity.",
        ),
    ),
    ("Rapid Antigen", "COVID-19"): StudyNote(
        overview=(
            "Cochrane living review shows antigen tests are highly specific but "
            "variably sensitive, best early in symptomatic infection and with "
            "high viral loads."
        ),
        sample_size="Hundreds of evaluations pooled in serial Cochrane updates.",
        population="Symptomatic and asymptomatic individuals across community/clinical sites.",
        setting="Point-of-care/community testing sites.",
        design="Systematic review and meta-analysis of diagnostic test accuracy vs RT-PCR.",
        year="Evidence base summarized 2021 and updated since.",
        caveats=(
            "Lower sensitivity later in illness or in asymptomatic screens.",
            "Performance varies by brand and specimen quality.",
            "Repeat testing improves yield after early negatives.",
        ),
    ),
    ("PCR", "COVID-19"): StudyNote(
        overview=(
            "RT-PCR has very high analytical sensitivity; clinical sensitivity "
            "depends on timing, specimen site, and pre-analytical factors."
        ),
        sample_size="Narrative/technical evidence summary with broad platform coverage.",
        population="Symptomatic and asymptomatic individuals.",
        setting="Laboratory-based molecular testing.",
        design="CAP evidence overview and technical guidance.",
        year="Publication year: 2020 (continually updated guidance thereafter).",
        caveats=(
            "Swab technique/site matter; early or late sampling can lower yield.",
            "Ct values are not standardized across platforms.",
            "Residual RNA can remain detectable after infectious period.",
        ),
    ),
    ("BNP", "Heart Failure"): StudyNote(
        overview=(
            "In acute dyspnea, natriuretic peptides (BNP/NT-proBNP) aid "
            "diagnosis of acute heart failure with good rule-out performance at "
            "low cutoffs; accuracy impacted by obesity (lower) and renal "
            "dysfunction/age (higher)."
        ),
        sample_size=(
            "Multiple ED cohorts; classic ED trial n=452; large meta-analyses "
            ">10 studies."
        ),
        population="Adults presenting with undifferentiated dyspnea to the ED.",
        setting="Emergency departments; inpatient admission cohorts.",
        design="Diagnostic cohort studies and systematic reviews/meta-analyses.",
        year="Key studies 2005–2016; ongoing reviews 2024.",
        caveats=(
            "Use assay-specific cutoffs and age-adjusted thresholds (esp. NT-proBNP).",
            "Obesity lowers levels (false negatives); renal dysfunction elevates "
            "(false positives).",
        ),
    ),
    ("Troponin (hs)", "Myocardial Infarction"): StudyNote(
        overview=(
            "High-sensitivity troponin assays enable early rule-out pathways for "
            "NSTEMI with high sensitivity when combined with timing and delta "
            "change algorithms."
        ),
        sample_size=(
            "Evidence base spans large multi-center observational cohorts and "
            "RCTs summarized by NICE."
        ),
        population="Adults with suspected ACS in ED/observation settings.",
        setting="EDs using hs-cTnT or hs-cTnI assays with protocolized pathways.",
        design="Diagnostics guidance synthesizing trials/observational accuracy studies.",
        year="Publication year: 2020 (DG40).",
        caveats=(
            "Non-ischemic causes (myocarditis, tachyarrhythmia, CKD) elevate troponin.",
            "Time from symptom onset and serial sampling are critical.",
            "Sex-specific 99th percentile cutoffs recommended.",
        ),
    ),
    ("Wells Score", "DVT"): StudyNote(
        overview=(
            "Clinical prediction rule to stratify pretest probability; use with "
            "D-dimer to safely exclude DVT in low-risk patients."
        ),
        sample_size="Numerous validation cohorts; broad literature summarized in reviews.",
        population="Adults with suspected lower-extremity DVT.",
        setting="Outpatient and ED settings.",
        design="Derivation/validation studies; narrative/systematic reviews.",
        year="Representative review: 2017.",
        caveats=(
            "Subjective components can vary between clinicians.",
            "Prevalence shifts materially change post-test probabilities.",
        ),
    ),
    ("Ultrasound", "DVT"): StudyNote(
        overview=(
            "Compression ultrasonography is first-line imaging; meta-analyses "
            "show high sensitivity for proximal DVT and slightly lower for "
            "distal/calf DVT."
        ),
        sample_size="Meta-analysis pooling numerous diagnostic cohorts.",
        population="Symptomatic patients with suspected DVT.",
        setting="Vascular labs/EDs.",
        design="Systematic review and meta-analysis vs venography/follow-up.",
        year="Publication year: 2005",
        caveats=(
            "Distal DVT harder to detect; repeat studies may be needed.",
            "Body habitus/edema can limit visualization; operator experience matters.",
        ),
    ),
    ("Spirometry", "COPD"): StudyNote(
        overview=(
            "Diagnosis based on post-bronchodilator FEV1/FVC below threshold "
            "(fixed 0.70 or LLN). Review highlights under-diagnosis and "
            "limitations of fixed ratio (risk of over-/under-diagnosis by age)."
        ),
        sample_size="Narrative review; cites multiple population surveys and diagnostic studies.",
        population="Adults with chronic respiratory symptoms or risk factors (e.g., smokers).",
        setting="Primary care/pulmonary labs.",
        design="Review article of diagnostic criteria and performance.",
        year="Publication year: 2014",
        caveats=(
            "Fixed 0.70 cutoff may overdiagnose elderly, underdiagnose younger adults.",
            "Poor technique/effort reduces reliability; ensure repeatability and "
            "bronchodilator response assessment.",
        ),
    ),
    ("Dermatoscopy", "Melanoma"): StudyNote(
        overview=(
            "Recent review shows dermoscopy improves diagnostic accuracy for "
            "pigmented lesions vs naked-eye exam; typical figures around 0.90 "
            "sensitivity/specificity in trained hands."
        ),
        sample_size="Literature review summarizing multiple reader studies and meta-analyses.",
        population="Adults with suspicious skin lesions.",
        setting="Dermatology/primary care with training.",
        design="Review article (practice-oriented) of diagnostic accuracy literature.",
        year="Publication year: 2024",
        caveats=(
            "Training and experience strongly influence performance.",
            "Atypical benign lesions (e.g., Spitz nevus) can mimic melanoma.",
            "Use structured algorithms (ABCD, 7-point) to standardize.",
        ),
    ),
    ("CA-125", "Ovarian Cancer"): StudyNote(
        overview=(
            "CA-125 is frequently elevated in epithelial ovarian cancer but "
            "lacks sensitivity for early-stage disease and can be elevated in "
            "benign conditions; performance improves when combined with other "
            "markers/algorithms."
        ),
        sample_size="Multiple cohorts and reviews; classic figures synthesized across studies.",
        population="Women with adnexal masses or in high-risk screening protocols.",
        setting="Outpatient/gynecologic oncology.",
        design="Reviews and comparative biomarker studies.",
        year="Key evidence: 2010–2024 syntheses.",
        caveats=(
            "Premenopausal specificity is lower due to benign gynecologic causes.",
            "Early-stage disease may have normal CA-125.",
            "Serial change or ROMA (HE4 + CA-125) can improve discrimination.",
        ),
    ),
    ("LDCT", "Lung Cancer"): StudyNote(
        overview=(
            "NLST analyses show LDCT screening has high sensitivity with "
            "moderate specificity and reduces lung-cancer mortality in "
            "high-risk smokers."
        ),
        sample_size=(
            "NLST (n≈53,000) with operating characteristics analyzed by Pinsky; "
            "multiple large trials/USPSTF evidence review (13 studies; "
            "n≈76,856 for sensitivity)."
        ),
        population="High-risk current/former smokers meeting screening criteria.",
        setting="Structured screening programs.",
        design="Randomized trials and evidence reviews; ROC analysis of NLST.",
        year="Key publications: 2013 (ROC), 2021 (USPSTF review).",
        caveats=(
            "High nodule detection → downstream work-ups/overdiagnosis.",
            "Adherence to annual screening affects outcomes; use Lung-RADS for management.",
        ),
    ),
    ("Chest X-ray", "Lung Cancer"): StudyNote(
        overview=(
            "Systematic review in symptomatic primary-care populations found CXR "
            "sensitivity ~81% and specificity ~68% for lung malignancy; normal "
            "films do not exclude cancer when suspicion is high."
        ),
        sample_size="10 studies included; 5 contributed to sensitivity meta-analysis.",
        population="Adults presenting with symptoms suggestive of lung cancer in primary care.",
        setting="Primary care/open-access radiography programs.",
        design="Systematic review and meta-analysis.",
        year="Publication year: 2021",
        caveats=(
            "Lower sensitivity for small/central lesions and early-stage disease.",
            "Consider low threshold for CT when risk remains high despite normal CXR.",
        ),
    ),
}
